"""
==============================================================================
Main API Router
==============================================================================

Combines the product and health routes.

==============================================================================
"""

from fastapi import APIRouter

from product_api.api import health, products


class MainAPIRouter:
    """
    Main API router combining all route groups.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter()
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all routers."""
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
