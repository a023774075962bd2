"""
PinNotes Backend — Request ID Middleware
==========================================

What:  Assigns a short ID to each incoming request and returns it in the
       `X-Request-ID` response header.
Why:   Lets every log line of one request be correlated, and lets a user
       quote the ID from an error report.
How:   Uses the client's `X-Request-ID` header when present, otherwise a
       fresh 8-character UUID prefix; stores it in a ContextVar for loggers
       and in `request.state` for handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
