"""
Pydantic schemas for the operator login flow.
"""

from pydantic import BaseModel, Field

from examples_admin.models.media import AuthState


class LoginRequest(BaseModel):
    """Credentials submitted from the login form."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """Current state of the browser session's auth gate."""

    state: AuthState
    authenticated: bool
    username: str | None = None
    error: str | None = Field(
        default=None,
        description="Message from the last failed login attempt",
    )
