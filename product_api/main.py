"""
==============================================================================
Simple Product API - Application Entry Point
==============================================================================

FastAPI application exposing CRUD operations over an in-memory
product store seeded from a JSON file at startup.

Usage:
------
    # Development
    uvicorn product_api.main:app --reload

    # Production
    uvicorn product_api.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.config import Settings, get_settings
from product_api.core.exceptions import register_exception_handlers
from product_api.api.router import api_router
from product_api.catalog.loader import load_products
from product_api.catalog.store import ProductStore


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Owns the product store. A store passed in is used as-is; otherwise
    one is built from the seed file during startup.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ProductStore] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            store: Pre-built store (seeded from products_file if None)
        """
        self._settings = settings or get_settings()
        self._store = store
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="CRUD API over an in-memory product catalog",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        app.state.store = self._store

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown()

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"Starting {self._settings.app_name}")
        logger.info("=" * 60)

        if self._store is None:
            self._store = self._load_store()
            app.state.store = self._store

        logger.info(f"{self._settings.app_name} ready with {len(self._store)} products")
        logger.info(f"Running on http://{self._settings.host}:{self._settings.port}")

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("Shutting down...")

    def _load_store(self) -> ProductStore:
        """Build the store from the seed file, empty if the file is missing."""
        products_path = self._settings.products_path
        if not products_path.exists():
            logger.warning(f"Products file not found: {products_path}, starting empty")
            return ProductStore()
        return ProductStore(load_products(products_path))

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def store(self) -> Optional[ProductStore]:
        """Get the product store (None before startup when not injected)."""
        return self._store

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None
) -> FastAPI:
    """Build a configured FastAPI application."""
    return Application(settings, store).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
