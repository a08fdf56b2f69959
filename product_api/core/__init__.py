"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: Product failures, handlers and factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from product_api.core import exceptions
    raise exceptions.product_not_found("CLN-CDE-BOOK")

==============================================================================
"""

from .exceptions import (
    AppException,
    DuplicateResourceError,
    ResourceNotFoundError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "DuplicateResourceError",
    "ResourceNotFoundError",
    "register_exception_handlers",
]
