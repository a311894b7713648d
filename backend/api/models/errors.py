"""
Error response models.

Standardized error responses for the API.
"""

from datetime import datetime

from pydantic import Field

from shared.models import ApiModel


class ErrorResponse(ApiModel):
    """
    Standard error response format.

    ``message`` is always a list, even for a single message.
    """

    status_code: int
    timestamp: datetime
    path: str
    method: str
    error: str = Field(..., description="Machine-readable error code")
    message: list[str]
