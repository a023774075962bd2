"""
PinNotes Backend — Access Log Middleware
==========================================

One line per API request on the `pinnotes.access` logger:

    PUT /api/notes/{note_id} 404 3.2ms [a1b2c3d4] from 127.0.0.1

The path is logged as the matched route template when there is one, so
note ids stay out of the access log and lines group by endpoint. Request
bodies are never logged; note text belongs to the user.

Level by status class: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from pinnotes.middleware.request_id import request_id_var

logger = logging.getLogger("pinnotes.access")

# Health probes are not logged
QUIET_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log line once the response status is known."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        rid = request_id_var.get("")
        route = _route_label(request)
        client = request.client.host if request.client else "unknown"

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            route,
            response.status_code,
            elapsed_ms,
            rid,
            client,
            extra={
                "request_id": rid,
                "route": route,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
