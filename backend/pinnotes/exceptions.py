"""
PinNotes Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and the uniform response envelope, without leaking
       internal details to the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{success: false, ...}` envelopes with correct status codes.
Who:   Raised by the note store; caught by global handlers.

Exception Hierarchy:
    PinNotesError (base)
    ├── ValidationError   → 400 Bad Request (list of field errors)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure, as sent to clients."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class PinNotesError(Exception):
    """
    Base exception for all PinNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PinNotesError):
    """
    Raised when note fields fail the schema rules.

    HTTP:    400 Bad Request

    Example response:
        {
            "success": false,
            "errors": [{"field": "title", "message": "Title must be at least 3 characters"}]
        }
    """

    def __init__(
        self,
        errors: Optional[List[FieldError]] = None,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = list(errors or [])
        ctx = context or {}
        ctx["fields"] = [e.field for e in self.errors]
        super().__init__(message=message, context=ctx)


class NotFoundError(PinNotesError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    The message is generic ("Note not found"); the looked-up identifier
    goes into the context for logging only.
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PinNotesError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Detailed error
    info (SQL, constraint names) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
