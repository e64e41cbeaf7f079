"""
Custom exceptions for the Examples Admin Console.

Every failure degrades to an inline message: nothing here is fatal to the
process.
"""

from typing import Any


class ConsoleException(Exception):
    """Base exception for all console errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class ValidationException(ConsoleException):
    """400 - Malformed request (unknown subcategory, empty file, wrong media type)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class UnauthorizedException(ConsoleException):
    """401 - The browser session has not logged in."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            error="unauthorized",
            message=message,
            status_code=401,
        )


class InvalidCredentialsException(ConsoleException):
    """401 - The backend rejected the credentials offered at login."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(
            error="invalid_credentials",
            message=message,
            status_code=401,
        )


class SessionExpiredException(ConsoleException):
    """401 - The backend rejected cached credentials mid-session; the session is logged out."""

    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(
            error="session_expired",
            message=message,
            status_code=401,
        )


class ConfirmationRequiredException(ConsoleException):
    """409 - A destructive action was requested without operator confirmation."""

    def __init__(self, filename: str):
        super().__init__(
            error="confirmation_required",
            message=f"Delete {filename}? Repeat the request with confirm=true",
            status_code=409,
            details={"filename": filename},
        )


class PayloadTooLargeException(ConsoleException):
    """413 - Upload size exceeds the limit for its media kind."""

    def __init__(self, max_size: int, media_kind: str = "file"):
        max_size_mb = max_size / (1024 * 1024)
        super().__init__(
            error="payload_too_large",
            message=f"Maximum {media_kind} upload size exceeded ({max_size_mb:.0f}MB limit)",
            status_code=413,
        )


class AuthenticationFailedException(ConsoleException):
    """502 - The login probe got a non-success, non-401 answer."""

    def __init__(self, status_code: int | None = None):
        super().__init__(
            error="authentication_failed",
            message="Authentication failed",
            status_code=502,
            details={"backend_status": status_code} if status_code else None,
        )


class BackendRejectedException(ConsoleException):
    """4xx/5xx - The backend refused a request; its detail is surfaced verbatim."""

    def __init__(self, action: str, detail: Any, backend_status: int):
        status_code = backend_status if 400 <= backend_status < 600 else 502
        super().__init__(
            error="backend_rejected",
            message=f"{action} failed: {detail}",
            status_code=status_code,
            details={"detail": detail, "backend_status": backend_status},
        )
        self.detail = detail


class BackendUnavailableException(ConsoleException):
    """503 - The examples backend could not be reached."""

    def __init__(self, message: str = "Failed to connect to server"):
        super().__init__(
            error="backend_unavailable",
            message=message,
            status_code=503,
        )
