"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        401: {"error": "invalid_credentials", "message": "Invalid username or password"}
        401: {"error": "session_expired", "message": "Session expired, please log in again"}
        409: {"error": "confirmation_required", "message": "Delete 3.png? ..."}
        4xx/5xx: {"error": "backend_rejected", "message": "Upload failed: <detail>"}
        503: {"error": "backend_unavailable", "message": "Failed to connect to server"}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["validation_failed", "invalid_credentials", "session_expired", "backend_rejected"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
