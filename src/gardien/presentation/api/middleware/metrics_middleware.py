"""
Prometheus metrics middleware for FastAPI.

Labels requests by route template (e.g. /keys/delete/{ipid}) so that
label cardinality stays bounded by the number of registered routes.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from gardien.infrastructure.monitoring import metrics

UNMATCHED_ENDPOINT = "unmatched"


def route_template(request: Request) -> str:
    """Return the matched route path, or a fixed label for unknown paths."""
    return getattr(request.scope.get("route"), "path", UNMATCHED_ENDPOINT)


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect HTTP metrics.

    Records request count, duration and errors per method and route.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            endpoint = route_template(request)
            metrics.http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(time.time() - start_time)
            metrics.http_errors_total.labels(
                method=method, endpoint=endpoint, error_type=type(e).__name__
            ).inc()
            raise

        # Route is only known once the router has matched
        endpoint = route_template(request)

        metrics.http_request_duration_seconds.labels(
            method=method, endpoint=endpoint
        ).observe(time.time() - start_time)
        metrics.http_requests_total.labels(
            method=method, endpoint=endpoint, status=response.status_code
        ).inc()

        if response.status_code >= 400:
            metrics.http_errors_total.labels(
                method=method,
                endpoint=endpoint,
                error_type="server_error" if response.status_code >= 500 else "client_error",
            ).inc()

        return response
