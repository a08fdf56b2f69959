"""
==============================================================================
Settings Tests
==============================================================================
"""

import logging

import pytest
from pydantic import ValidationError

from product_api.config import Settings


class TestSettings:
    """Tests for settings parsing and derived values."""

    def test_unknown_env_falls_back(self):
        assert Settings(app_env="Weird").app_env == "development"

    def test_env_normalized(self):
        assert Settings(app_env=" PRODUCTION ").is_production is True

    def test_cors_origins_list(self):
        settings = Settings(cors_origins='["http://localhost:3000"]')
        assert settings.cors_origins_list == ["http://localhost:3000"]

    def test_cors_origins_invalid_json(self):
        assert Settings(cors_origins="not json").cors_origins_list == ["*"]

    def test_log_level(self):
        assert Settings(log_level="warning", debug=False).effective_log_level == logging.WARNING
        assert Settings(log_level="warning", debug=True).effective_log_level == logging.DEBUG

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_products_path(self):
        assert Settings(products_file="seed/p.json").products_path.name == "p.json"
