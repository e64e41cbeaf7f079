"""
Examples Admin Console - Main Application Entry Point.

FastAPI application that fronts the examples backend for a browser-based
operator console.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from examples_admin import __version__
from examples_admin.api.v1.router import api_router
from examples_admin.auth.session import SessionStore
from examples_admin.config import get_settings
from examples_admin.core.exceptions import ConsoleException
from examples_admin.core.responses import create_error_response
from examples_admin.services.metrics import MetricsMiddleware, get_metrics_collector

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Opens the shared backend client on startup and closes it on shutdown.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Examples backend: {settings.EXAMPLES_API_URL}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    async with httpx.AsyncClient(
        base_url=settings.EXAMPLES_API_URL,
        timeout=settings.BACKEND_TIMEOUT,
    ) as http:
        app.state.http = http
        yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Examples Admin Console

Operator console for the before/after examples and audio samples shown on
the marketing site.

### Features
- **Login**: HTTP Basic credentials checked by the examples backend
- **Examples**: before/after pairs per category and subcategory
- **Audio**: samples per speaker mode and language
- **Upload/Delete**: automatic numbering by the backend, listing refreshed after every change
    """,
    version=__version__,
    openapi_tags=[
        {"name": "session", "description": "Operator login and logout"},
        {"name": "categories", "description": "Example categories"},
        {"name": "examples", "description": "Before/after example management"},
        {"name": "audio", "description": "Audio sample management"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)
app.state.sessions = SessionStore(idle_timeout=settings.SESSION_IDLE_TIMEOUT)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)


@app.exception_handler(ConsoleException)
async def console_exception_handler(request: Request, exc: ConsoleException) -> JSONResponse:
    """
    Global exception handler for console exceptions.
    Every failure becomes an inline message for the operator.
    """
    get_metrics_collector().record_console_error(exc.error)
    return create_error_response(
        error=exc.error,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(
        error="internal_error",
        message="An unexpected error occurred",
        status_code=500,
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint describing the console API."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "examples_admin.main:app",
        host="0.0.0.0",
        port=3000,
        reload=settings.DEBUG,
    )
