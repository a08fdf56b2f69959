"""
Application Exception Handling

Typed product failures and the FastAPI handlers that turn them into
ApiMessage responses.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from product_api.schemas.common import ApiMessage


# Module logger
logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Base class for failures reported back to the client.

    Both product failures are reported as 400 Bad Request, including
    the not-found case.

    Usage:
        raise DuplicateResourceError("Product with id X already exists")
    """

    status: HTTPStatus = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message naming the offending id
        """
        self.message = message
        super().__init__(self.message)

    def to_message(self) -> ApiMessage:
        """Convert exception to the response payload."""
        return ApiMessage.of(self.status, self.message)


class DuplicateResourceError(AppException):
    """A product with the same id is already stored."""


class ResourceNotFoundError(AppException):
    """No product is stored under the requested id."""


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to an ApiMessage JSON response.
    """
    logger.warning(f"{request.method} {request.url.path} -> {exc.status.value}: {exc.message}")
    return JSONResponse(
        status_code=exc.status.value,
        content=exc.to_message().model_dump()
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Generic 500 response for anything not mapped above."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=status.value,
        content=ApiMessage.of(status, "Internal server error").model_dump()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_exists(product_id: str) -> DuplicateResourceError:
    """Create product already exists exception."""
    return DuplicateResourceError(f"Product with id {product_id} already exists")


def product_not_found(product_id: str) -> ResourceNotFoundError:
    """Create product not found exception."""
    return ResourceNotFoundError(f"Product with id {product_id} not found!")
