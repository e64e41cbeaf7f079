"""
Operator credentials and their session-scoped cache.
"""

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Username and password typed into the login form."""

    username: str
    password: str = field(repr=False)

    def authorization_header(self) -> str:
        """HTTP Basic ``Authorization`` header value."""
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8"))
        return f"Basic {token.decode('ascii')}"


class CredentialStore:
    """
    Holds the credentials of one browser session.

    Kept in memory only. The backend's 401 is the sole judge of validity, so
    there is no client-side expiry.
    """

    def __init__(self) -> None:
        self._credentials: Credentials | None = None

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    def save(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def clear(self) -> None:
        self._credentials = None

    def auth_headers(self) -> dict[str, str]:
        """Headers to attach to a backend request; empty when logged out."""
        if self._credentials is None:
            return {}
        return {"Authorization": self._credentials.authorization_header()}
