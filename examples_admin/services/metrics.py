"""
Lightweight Prometheus-compatible metrics collector.

Tracks console requests per route template and the console errors they
ended in (``backend_unavailable``, ``session_expired``, ...), so an operator
can tell a flaky backend from a rejected login.
"""

import time
from collections import defaultdict
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

PREFIX = "examples_admin"


class MetricsCollector:
    """In-process counters for console traffic."""

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], int] = defaultdict(int)
        self._route_failures: dict[tuple[str, str], int] = defaultdict(int)
        self._route_seconds: dict[tuple[str, str], float] = defaultdict(float)
        self._statuses: dict[int, int] = defaultdict(int)
        self._console_errors: dict[str, int] = defaultdict(int)
        self._started: float = time.time()

    def record_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float,
    ) -> None:
        """Record a completed request against its route template."""
        route = (method, path)
        self._routes[route] += 1
        self._route_seconds[route] += duration
        self._statuses[status_code] += 1
        if status_code >= 400:
            self._route_failures[route] += 1

    def record_console_error(self, error: str) -> None:
        """Count a ``ConsoleException`` by its error code."""
        self._console_errors[error] += 1

    @property
    def session_expiries(self) -> int:
        return self._console_errors.get("session_expired", 0)

    def get_metrics(self) -> dict[str, Any]:
        """Get metrics as a structured dictionary."""
        requests = sum(self._routes.values())
        failures = sum(self._route_failures.values())

        return {
            "uptime_seconds": round(time.time() - self._started, 2),
            "total_requests": requests,
            "total_errors": failures,
            "error_rate": round(failures / requests, 4) if requests else 0,
            "session_expiries": self.session_expiries,
            "console_errors": dict(sorted(self._console_errors.items())),
            "requests_by_endpoint": {_label(r): n for r, n in self._routes.items()},
            "errors_by_endpoint": {_label(r): n for r, n in self._route_failures.items()},
            "status_code_counts": {str(code): n for code, n in sorted(self._statuses.items())},
            "avg_response_time_ms": {
                _label(r): round(self._route_seconds[r] / n * 1000, 2)
                for r, n in self._routes.items()
            },
        }

    def to_prometheus(self) -> str:
        """
        Export metrics in Prometheus text exposition format.
        See: https://prometheus.io/docs/instrumenting/exposition_formats/
        """
        route_labels = {r: {"method": r[0], "path": r[1]} for r in self._routes}
        averages = {r: self._route_seconds[r] / n for r, n in self._routes.items()}

        blocks = [
            _family("uptime_seconds", "gauge", "Time since service start in seconds",
                    [({}, f"{time.time() - self._started:.2f}")]),
            _family("http_requests_total", "counter", "Console HTTP requests",
                    [(route_labels[r], n) for r, n in sorted(self._routes.items())]),
            _family("http_errors_total", "counter", "Console HTTP responses with status 4xx/5xx",
                    [(route_labels[r], n) for r, n in sorted(self._route_failures.items())]),
            _family("http_response_time_seconds", "gauge", "Average response time in seconds",
                    [(route_labels[r], f"{avg:.6f}") for r, avg in sorted(averages.items())]),
            _family("console_errors_total", "counter", "Console errors by error code",
                    [({"error": e}, n) for e, n in sorted(self._console_errors.items())]),
        ]
        return "\n".join(blocks)


def _label(route: tuple[str, str]) -> str:
    return f"{route[0]} {route[1]}"


def _family(name: str, kind: str, help_text: str, samples: list[tuple[dict[str, str], Any]]) -> str:
    lines = [f"# HELP {PREFIX}_{name} {help_text}", f"# TYPE {PREFIX}_{name} {kind}"]
    for labels, value in samples:
        rendered = ",".join(f'{k}="{v}"' for k, v in labels.items())
        lines.append(f"{PREFIX}_{name}{{{rendered}}} {value}" if rendered else f"{PREFIX}_{name} {value}")
    return "\n".join(lines) + "\n"


# Global singleton
_metrics_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Get or create the global metrics collector."""
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector()
    return _metrics_collector


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Records every console request except the metrics endpoints.

    Requests are labelled by route template, so filenames in delete URLs
    do not turn into label values.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if "/metrics" in request.url.path:
            return await call_next(request)

        start = time.time()
        response = await call_next(request)
        duration = time.time() - start

        route = request.scope.get("route")
        get_metrics_collector().record_request(
            method=request.method,
            path=getattr(route, "path", None) or request.url.path,
            status_code=response.status_code,
            duration=duration,
        )
        return response
