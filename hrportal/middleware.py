# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware: request context and Prometheus metrics in one pass.

Each request gets an ``X-Request-ID`` (the caller's, or a fresh one) and is
counted under its route template, e.g. ``/api/v1/employees/{employee_id}``,
so ids never become label values. Paths that match no route share the
``unmatched`` label.
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from hrportal.core.logging import get_logger
from hrportal.metrics import HTTP_ERRORS, REQUEST_COUNT, REQUEST_LATENCY

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
UNMATCHED = "unmatched"
UNTRACKED_PREFIXES = ("/health", "/metrics", "/openapi.json", "/docs", "/redoc")


def route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED


def _tracked(path: str) -> bool:
    return not any(path == p or path.startswith(p + "/") for p in UNTRACKED_PREFIXES)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag the request with an id, then record its outcome."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            if _tracked(request.url.path):
                self._record(request, request_id, status, time.perf_counter() - start)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _record(request: Request, request_id: str, status: int, elapsed: float) -> None:
        endpoint = route_template(request)
        REQUEST_COUNT.labels(
            method=request.method, endpoint=endpoint, status=str(status)
        ).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(elapsed)
        if status >= 400:
            HTTP_ERRORS.labels(
                method=request.method, endpoint=endpoint, status=str(status)
            ).inc()
        logger.log(
            logging_level(status),
            "%s %s -> %d", request.method, endpoint, status,
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(elapsed * 1000, 2),
            },
        )


def logging_level(status: int) -> int:
    if status >= 500:
        return logging.WARNING
    return logging.DEBUG
