"""
Browser sessions.

A session is kept only once its operator has logged in; until then every
request gets a throwaway one. A kept session lives until logout, a backend
401, or the idle timeout. It owns the auth gate and the listing views, all
held in memory.
"""

import logging
import secrets
import time
from collections.abc import Callable

from examples_admin.auth.gate import AuthGate
from examples_admin.schemas.audio import AudioCatalog
from examples_admin.schemas.example import CategoryResponse, ExampleListing
from examples_admin.services.views import ListingView

logger = logging.getLogger(__name__)


class ConsoleSession:
    """State of one operator's browser session."""

    def __init__(
        self,
        session_id: str | None = None,
        on_close: Callable[[str], None] | None = None,
    ) -> None:
        self.id = session_id or secrets.token_urlsafe(32)
        self.categories: list[CategoryResponse] = []
        self.examples: ListingView[ExampleListing] = ListingView("example")
        self.audio: ListingView[AudioCatalog] = ListingView("audio")
        self.last_seen = time.monotonic()
        self._on_close = on_close
        self.gate = AuthGate(on_logout=self.close)

    def touch(self) -> None:
        self.last_seen = time.monotonic()

    def reset_views(self) -> None:
        """Forget everything fetched under the previous credentials."""
        self.categories = []
        self.examples.reset()
        self.audio.reset()

    def close(self) -> None:
        """Called by the gate on logout or expiry."""
        self.reset_views()
        if self._on_close is not None:
            self._on_close(self.id)


class SessionStore:
    """
    In-memory registry of logged-in browser sessions keyed by cookie value.

    Sessions idle for longer than *idle_timeout* seconds are logged out and
    dropped the next time the store is consulted.
    """

    def __init__(self, idle_timeout: float = 3600.0) -> None:
        self.idle_timeout = idle_timeout
        self._sessions: dict[str, ConsoleSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session: ConsoleSession) -> bool:
        return self._sessions.get(session.id) is session

    def get(self, session_id: str | None) -> ConsoleSession | None:
        self.prune()
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            session.touch()
        return session

    def new(self) -> ConsoleSession:
        """A session that is not kept until :meth:`add` is called."""
        return ConsoleSession(on_close=self.discard)

    def add(self, session: ConsoleSession) -> None:
        self._sessions[session.id] = session
        logger.debug(f"Keeping browser session ({len(self._sessions)} held)")

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def prune(self) -> int:
        """Log out idle sessions; return how many were dropped."""
        cutoff = time.monotonic() - self.idle_timeout
        idle = [s for s in self._sessions.values() if s.last_seen < cutoff]
        for session in idle:
            logger.info(f"Session of '{session.gate.username}' idle for {self.idle_timeout:.0f}s; logging out")
            session.gate.logout()
        return len(idle)
