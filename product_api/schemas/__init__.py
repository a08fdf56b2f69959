"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas shared by the API.

==============================================================================
"""

from .common import ApiMessage, TIMESTAMP_FORMAT

__all__ = [
    "ApiMessage",
    "TIMESTAMP_FORMAT",
]
