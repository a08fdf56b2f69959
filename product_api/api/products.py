"""
==============================================================================
Product Endpoints
==============================================================================

CRUD endpoints over the in-memory product store.

Endpoints:
---------
    GET    /products[?byType=<label>]
    POST   /products
    GET    /products/{product_id}
    DELETE /products/{product_id}

Failures are raised as typed exceptions and translated by the handlers
in product_api.core.exceptions.

==============================================================================
"""

import logging
from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from product_api.catalog.models import Product
from product_api.catalog.store import ProductStore
from product_api.core import exceptions
from product_api.core.dependencies import get_product_store
from product_api.schemas.common import ApiMessage


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    def list_products(self, product_type: Optional[str]) -> List[Product]:
        """List all products, or only those of one type."""
        if product_type:
            return self._store.find_by_type(product_type)
        return self._store.find_all()

    def save(self, product: Product) -> Product:
        """Store a new product."""
        saved = self._store.save(product)
        logger.info(f"Created product {saved.id}")
        return saved

    def get_by_id(self, product_id: str) -> Product:
        """Get product by id."""
        product = self._store.find_by_id(product_id)

        if product is None:
            raise exceptions.product_not_found(product_id)

        return product

    def delete(self, product_id: str) -> ApiMessage:
        """Delete product by id and confirm."""
        self._store.delete(product_id)
        logger.info(f"Deleted product {product_id}")
        return ApiMessage.of(
            HTTPStatus.OK,
            f"Product with id {product_id} has been deleted!"
        )


@router.get("", response_model=List[Product])
async def list_products(
    by_type: Optional[str] = Query(None, alias="byType"),
    store: ProductStore = Depends(get_product_store)
):
    """List all products or filter by type label (case-insensitive)."""
    controller = ProductController(store)
    return controller.list_products(by_type)


@router.post("", response_model=Product)
async def save_product(
    product: Product,
    store: ProductStore = Depends(get_product_store)
):
    """Create a product. Fails with 400 if the id already exists."""
    controller = ProductController(store)
    return controller.save(product)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store)
):
    """Get product by id."""
    controller = ProductController(store)
    return controller.get_by_id(product_id)


@router.delete("/{product_id}", response_model=ApiMessage)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store)
):
    """Delete product by id."""
    controller = ProductController(store)
    return controller.delete(product_id)
