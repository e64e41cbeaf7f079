"""
Session dependencies for FastAPI.
Resolve the browser session from its cookie and guard authenticated endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request, Response

from examples_admin.auth.session import ConsoleSession, SessionStore
from examples_admin.config import Settings, get_settings
from examples_admin.core.exceptions import UnauthorizedException


def get_session_store(request: Request) -> SessionStore:
    """The application-wide session registry."""
    return request.app.state.sessions


async def get_console_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> ConsoleSession:
    """
    Dependency to get the caller's browser session.

    Unknown or missing cookies get a fresh, unauthenticated session that is
    not kept; only a successful login stores it (see :func:`keep_session`).
    """
    session = store.get(request.cookies.get(settings.SESSION_COOKIE_NAME))
    if session is None:
        session = store.new()
    request.state.console_session = session
    return session


def keep_session(
    session: ConsoleSession,
    response: Response,
    store: SessionStore,
    settings: Settings,
) -> None:
    """
    Store a freshly logged-in session and hand its cookie to the browser.

    The cookie carries no max-age, so the browser drops it when its session
    ends.
    """
    if session in store:
        return
    store.add(session)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session.id,
        httponly=True,
        samesite="lax",
    )


def forget_session(response: Response, settings: Settings) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME, httponly=True, samesite="lax")


async def require_authenticated(
    session: ConsoleSession = Depends(get_console_session),
) -> ConsoleSession:
    """
    Dependency for endpoints that talk to the backend on the operator's behalf.

    Raises:
        UnauthorizedException: The session has not logged in
    """
    if not session.gate.is_authenticated:
        raise UnauthorizedException()
    return session


# Type aliases for dependency injection
CurrentSession = Annotated[ConsoleSession, Depends(get_console_session)]
AuthenticatedSession = Annotated[ConsoleSession, Depends(require_authenticated)]
SessionRegistry = Annotated[SessionStore, Depends(get_session_store)]
