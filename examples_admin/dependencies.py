"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from examples_admin.auth.dependencies import AuthenticatedSession, CurrentSession
from examples_admin.backend.client import BackendClient
from examples_admin.config import Settings, get_settings
from examples_admin.services.audio_service import AudioService
from examples_admin.services.category_service import CategoryService
from examples_admin.services.example_service import ExampleService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """The shared backend HTTP client opened in the application lifespan."""
    return request.app.state.http


# Type aliases for cleaner endpoint signatures
HttpClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_login_backend(session: CurrentSession, http: HttpClient) -> BackendClient:
    """Backend client for a session that may not be logged in yet."""
    return BackendClient(http, session.gate)


def get_backend(session: AuthenticatedSession, http: HttpClient) -> BackendClient:
    """Backend client carrying the session's cached credentials."""
    return BackendClient(http, session.gate)


LoginBackend = Annotated[BackendClient, Depends(get_login_backend)]
Backend = Annotated[BackendClient, Depends(get_backend)]


def get_category_service(backend: Backend, settings: AppSettings) -> CategoryService:
    return CategoryService(backend, settings)


def get_example_service(
    session: AuthenticatedSession,
    backend: Backend,
    settings: AppSettings,
) -> ExampleService:
    return ExampleService(backend, session.examples, settings)


def get_audio_service(
    session: AuthenticatedSession,
    backend: Backend,
    settings: AppSettings,
) -> AudioService:
    return AudioService(backend, session.audio, settings)


Categories = Annotated[CategoryService, Depends(get_category_service)]
Examples = Annotated[ExampleService, Depends(get_example_service)]
Audio = Annotated[AudioService, Depends(get_audio_service)]
