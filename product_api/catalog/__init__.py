"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Product models, the in-memory store and the seed loader.

Classes:
--------
- Product, Price, ProductType: Pydantic models for products
- ProductStore: In-memory store with lookup, save and delete

==============================================================================
"""

from .models import Price, Product, ProductType
from .store import ProductStore
from .loader import load_products

__all__ = [
    "Price",
    "Product",
    "ProductType",
    "ProductStore",
    "load_products",
]
