"""
==============================================================================
Seed Loading Tests
==============================================================================

Tests for reading seed files and populating the store at startup.

==============================================================================
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from product_api.catalog.loader import load_products
from product_api.config import Settings
from product_api.main import create_app


SHIPPED_SEED = Path(__file__).resolve().parent.parent / "data" / "products.json"


def write_seed(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadProducts:
    """Tests for load_products."""

    def test_shipped_seed(self):
        products = load_products(SHIPPED_SEED)
        ids = [p.id for p in products]
        assert ids[0] == "CLN-CDE-BOOK"
        assert len(ids) == len(set(ids))

    def test_load_in_file_order(self, tmp_path: Path, product_payload: dict):
        second = dict(product_payload, id="SECOND")
        seed = write_seed(tmp_path / "products.json", [product_payload, second])
        assert [p.id for p in load_products(seed)] == ["PRG-PRG-BOOK", "SECOND"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_products(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        seed = tmp_path / "products.json"
        seed.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_products(seed)

    def test_not_a_list(self, tmp_path: Path, product_payload: dict):
        seed = write_seed(tmp_path / "products.json", product_payload)
        with pytest.raises(ValueError):
            load_products(seed)

    def test_invalid_product(self, tmp_path: Path, product_payload: dict):
        product_payload["type"] = "Spaceships"
        seed = write_seed(tmp_path / "products.json", [product_payload])
        with pytest.raises(ValueError, match="index 0"):
            load_products(seed)


class TestStartupSeeding:
    """Tests for populating the store when the application starts."""

    def test_store_seeded_on_startup(self, tmp_path: Path, product_payload: dict):
        seed = write_seed(tmp_path / "products.json", [product_payload])
        app = create_app(settings=Settings(products_file=str(seed)))

        with TestClient(app) as client:
            response = client.get("/products")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["PRG-PRG-BOOK"]

    def test_missing_seed_starts_empty(self, tmp_path: Path):
        settings = Settings(products_file=str(tmp_path / "missing.json"))

        with TestClient(create_app(settings=settings)) as client:
            response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []
