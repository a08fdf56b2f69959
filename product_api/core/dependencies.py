"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency functions shared by the route handlers.

The store is owned by the application object and attached to
``app.state.store``; handlers receive it through ``get_product_store``.

Usage Examples:
--------------
    @router.get("")
    async def list_products(store: ProductStore = Depends(get_product_store)):
        return store.find_all()

==============================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from product_api.catalog.store import ProductStore


def get_product_store(request: Request) -> "ProductStore":
    """Get the store bound to the running application."""
    return request.app.state.store
