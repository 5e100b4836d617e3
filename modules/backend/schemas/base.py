"""
Base Schemas.

Response envelopes shared by every endpoint.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str


class SuccessResponse(BaseModel):
    """Base for responses that report a completed write."""

    success: bool = True
