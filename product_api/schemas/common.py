"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across the API.

==============================================================================
"""

from datetime import datetime
from http import HTTPStatus

from pydantic import BaseModel, Field


# dd-MM-yyyy hh:mm:ss, 12-hour clock
TIMESTAMP_FORMAT = "%d-%m-%Y %I:%M:%S"


class ApiMessage(BaseModel):
    """Status message returned for errors and delete confirmations."""
    status: str = Field(..., description="Named HTTP status, e.g. BAD_REQUEST")
    message: str
    timestamp: str

    @classmethod
    def of(cls, status: HTTPStatus, message: str) -> "ApiMessage":
        """Build a message stamped with the current local time."""
        return cls(
            status=status.name,
            message=message,
            timestamp=datetime.now().strftime(TIMESTAMP_FORMAT)
        )
