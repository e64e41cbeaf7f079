"""
Session endpoints - operator login and logout.
"""

from fastapi import APIRouter, Response

from examples_admin.auth.dependencies import (
    CurrentSession,
    SessionRegistry,
    forget_session,
    keep_session,
)
from examples_admin.auth.session import ConsoleSession
from examples_admin.dependencies import AppSettings, LoginBackend
from examples_admin.schemas.session import LoginRequest, SessionResponse

router = APIRouter()


def _session_response(session: ConsoleSession) -> SessionResponse:
    gate = session.gate
    return SessionResponse(
        state=gate.state,
        authenticated=gate.is_authenticated,
        username=gate.username,
        error=gate.last_error,
    )


@router.get("", response_model=SessionResponse)
async def get_session(session: CurrentSession):
    """Current auth state of this browser session."""
    return _session_response(session)


@router.post("/login", response_model=SessionResponse)
async def login(
    data: LoginRequest,
    response: Response,
    session: CurrentSession,
    backend: LoginBackend,
    store: SessionRegistry,
    settings: AppSettings,
):
    """
    Log the operator in.

    The credentials are probed against the backend's category listing:
    - 401: "Invalid username or password"
    - other non-success: "Authentication failed"
    - unreachable backend: "Failed to connect to server"

    A failed attempt keeps any session that was already logged in. The
    session cookie is only issued once a login succeeds.
    """
    await session.gate.login(data.username, data.password, backend.probe_credentials)
    keep_session(session, response, store, settings)
    return _session_response(session)


@router.post("/logout", response_model=SessionResponse)
async def logout(response: Response, session: CurrentSession, settings: AppSettings):
    """Drop cached credentials, everything fetched with them, and the session itself."""
    session.gate.logout()
    forget_session(response, settings)
    return _session_response(session)
