"""
Health and metrics endpoints.
No authentication required.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from examples_admin.auth.dependencies import get_session_store
from examples_admin.auth.gate import AuthGate
from examples_admin.auth.session import SessionStore
from examples_admin.backend.client import BackendClient
from examples_admin.config import get_settings
from examples_admin.core.exceptions import BackendUnavailableException
from examples_admin.dependencies import HttpClient
from examples_admin.services.metrics import get_metrics_collector

router = APIRouter()


@router.get("/health")
async def health_check(http: HttpClient):
    """
    Service health check endpoint.

    Any HTTP answer from the backend (401 included) counts as reachable.

    Returns:
        {"status": "ok"} when the backend answers
        {"status": "degraded", "issues": [...]} when it does not
    """
    settings = get_settings()
    backend = BackendClient(http, AuthGate())

    try:
        status_code = await backend.ping()
    except BackendUnavailableException as exc:
        return {
            "status": "degraded",
            "backend": settings.EXAMPLES_API_URL,
            "issues": [f"Backend: {exc.message}"],
        }

    return {
        "status": "ok",
        "backend": settings.EXAMPLES_API_URL,
        "backend_status": status_code,
    }


@router.get("/metrics")
async def metrics(store: SessionStore = Depends(get_session_store)):
    """
    Metrics as JSON: request counts, response times, error rates and
    active browser sessions.
    """
    metrics_data = get_metrics_collector().get_metrics()
    metrics_data["sessions"] = {"active": len(store)}
    return metrics_data


@router.get("/metrics/prometheus", response_class=PlainTextResponse)
async def metrics_prometheus(store: SessionStore = Depends(get_session_store)):
    """
    Prometheus text exposition format endpoint.
    Compatible with Prometheus scraping.
    """
    text_output = get_metrics_collector().to_prometheus()
    text_output += "# HELP examples_admin_sessions_active Browser sessions held in memory\n"
    text_output += "# TYPE examples_admin_sessions_active gauge\n"
    text_output += f"examples_admin_sessions_active {len(store)}\n"

    return PlainTextResponse(
        content=text_output,
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
