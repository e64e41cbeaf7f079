"""Core utilities and exceptions for the Examples Admin Console."""

from examples_admin.core.exceptions import (
    ConsoleException,
    ValidationException,
    UnauthorizedException,
    InvalidCredentialsException,
    SessionExpiredException,
    ConfirmationRequiredException,
    PayloadTooLargeException,
    AuthenticationFailedException,
    BackendRejectedException,
    BackendUnavailableException,
)

__all__ = [
    "ConsoleException",
    "ValidationException",
    "UnauthorizedException",
    "InvalidCredentialsException",
    "SessionExpiredException",
    "ConfirmationRequiredException",
    "PayloadTooLargeException",
    "AuthenticationFailedException",
    "BackendRejectedException",
    "BackendUnavailableException",
]
