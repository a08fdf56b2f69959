"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product CRUD endpoints

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
