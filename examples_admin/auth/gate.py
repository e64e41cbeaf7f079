"""
Auth gate for one browser session.

The gate never validates credentials itself: it probes a protected backend
endpoint and treats the backend's answer as authoritative.
"""

import logging
from collections.abc import Awaitable, Callable

from examples_admin.core.exceptions import (
    AuthenticationFailedException,
    BackendUnavailableException,
    ConsoleException,
    InvalidCredentialsException,
)
from examples_admin.auth.credentials import CredentialStore, Credentials
from examples_admin.models.media import AuthState

logger = logging.getLogger(__name__)

# Receives candidate credentials, returns the backend's HTTP status.
CredentialProbe = Callable[[Credentials], Awaitable[int]]


class AuthGate:
    """
    State machine guarding backend access.

    unauthenticated -> authenticating -> authenticated; authenticated ->
    unauthenticated on logout or when any backend call answers 401.

    Being authenticated means holding credentials the backend accepted. A
    login attempt in flight never hides them, so a session that is already
    logged in keeps working while the operator retries with other
    credentials.
    """

    def __init__(self, on_logout: Callable[[], None] | None = None) -> None:
        self.store = CredentialStore()
        self.last_error: str | None = None
        self._on_logout = on_logout
        self._attempts = 0

    @property
    def state(self) -> AuthState:
        if self.store.credentials is not None:
            return AuthState.AUTHENTICATED
        if self._attempts:
            return AuthState.AUTHENTICATING
        return AuthState.UNAUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.store.credentials is not None

    @property
    def username(self) -> str | None:
        credentials = self.store.credentials
        return credentials.username if credentials else None

    def auth_headers(self) -> dict[str, str]:
        return self.store.auth_headers()

    async def login(self, username: str, password: str, probe: CredentialProbe) -> None:
        """
        Try *username*/*password* against the backend.

        A failed attempt leaves the previous credentials in place, and they
        stay usable while the attempt is in flight.

        Raises:
            InvalidCredentialsException: The backend answered 401
            AuthenticationFailedException: Any other non-success answer
            BackendUnavailableException: The backend could not be reached
        """
        candidate = Credentials(username=username, password=password)
        self._attempts += 1
        self.last_error = None

        try:
            status_code = await probe(candidate)
            if status_code == 401:
                raise InvalidCredentialsException()
            if not 200 <= status_code < 300:
                raise AuthenticationFailedException(status_code)
        except ConsoleException as exc:
            self.last_error = exc.message
            if isinstance(exc, BackendUnavailableException):
                logger.warning(f"Login for '{username}' failed: backend unreachable")
            else:
                logger.info(f"Login for '{username}' rejected: {exc.message}")
            raise
        finally:
            self._attempts -= 1

        self.store.save(candidate)
        logger.info(f"Operator '{username}' logged in")

    def logout(self) -> None:
        """Explicit logout."""
        if self.username:
            logger.info(f"Operator '{self.username}' logged out")
        self._reset()

    def expire(self) -> None:
        """The backend answered 401 to cached credentials."""
        logger.warning(f"Backend rejected credentials of '{self.username}'; session logged out")
        self._reset()

    def _reset(self) -> None:
        self.store.clear()
        if self._on_logout is not None:
            self._on_logout()
