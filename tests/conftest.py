"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample products, a seeded store and a test client bound to an
application built around that store.

==============================================================================
"""

from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from product_api.catalog.models import Price, Product, ProductType
from product_api.catalog.store import ProductStore
from product_api.main import create_app


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def clean_code() -> Product:
    """The Clean Code book used throughout the scenarios."""
    return Product(
        id="CLN-CDE-BOOK",
        name="Clean Code",
        description="Clean Code: A Handbook of Agile Software Craftsmanship (Robert C. Martin)",
        price=Price(value=Decimal("18.99"), currency="GBP"),
        type=ProductType.BOOKS,
        department="Books and Stationery",
        weight="220g",
    )


@pytest.fixture
def usb_hub() -> Product:
    """An electronics product."""
    return Product(
        id="USB-C-HUB-7P",
        name="7-Port USB-C Hub",
        description="Aluminium USB-C hub",
        price=Price(value=Decimal("34.99"), currency="GBP"),
        type=ProductType.ELECTRONICS,
        department="Computing",
        weight="95g",
    )


@pytest.fixture
def product_payload() -> dict:
    """Wire-format body for a new product."""
    return {
        "id": "PRG-PRG-BOOK",
        "name": "The Pragmatic Programmer",
        "description": "The Pragmatic Programmer: Your Journey to Mastery",
        "price": {"value": 27.49, "currency": "GBP"},
        "type": "Book",
        "department": "Books and Stationery",
        "weight": "540g",
    }


# ============================================================================
# STORE AND CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def store(clean_code: Product) -> ProductStore:
    """Store seeded with the Clean Code book only."""
    return ProductStore([clean_code])


@pytest.fixture
def client(store: ProductStore) -> Generator[TestClient, None, None]:
    """Test client for an application using the seeded store."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
