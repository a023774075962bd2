"""
PinNotes Backend — Unhandled Error Middleware
===============================================

Turns an exception that escaped every route-level handler into the app's
catch-all `Exception` handler response (the 500 "Server error" envelope)
while still inside the middleware stack. The response then passes back
through the logging and request ID middleware like any other, so it is
access-logged and carries `X-Request-ID`.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Runs the app's catch-all exception handler inside the middleware chain."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            handler = request.app.exception_handlers.get(Exception)
            if handler is None:
                raise
            return await handler(request, exc)
