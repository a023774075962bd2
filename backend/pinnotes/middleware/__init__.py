# Middleware package init
"""
PinNotes Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → [Errors] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
    4. Errors: Unhandled exceptions become the 500 envelope here, so the
       layers above still see a response

    The order is reversed for responses, so the request ID header is set
    on the way out and the logging middleware sees the final status code.
"""
