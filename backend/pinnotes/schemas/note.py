"""
PinNotes Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract between client and backend,
       including every field rule a note must satisfy.
Why:   One explicit schema per endpoint with enumerated recognized fields;
       unknown keys in a request body are ignored.
How:   FastAPI validates request bodies against NoteCreate / NoteUpdate; the
       note store validates again through the same models before writing.
       Field rules raise PydanticCustomError so the message that reaches the
       client is exactly the rule's message (no "Value error, " prefix).

Wire format:
    camelCase on the wire (isPinned, createdAt, updatedAt), snake_case in
    Python. `populate_by_name` lets the store validate snake_case dicts.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from pinnotes.constants import (
    CATEGORY_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    DEFAULT_CATEGORY,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from pinnotes.exceptions import FieldError

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}


def _clean_text(value: Any, label: str, min_length: int, max_length: int) -> str:
    """Trims a required text field and applies its length bounds."""
    if value is None:
        raise PydanticCustomError("required", f"{label} is required")
    if not isinstance(value, str):
        raise PydanticCustomError("text_type", f"{label} must be text")

    value = value.strip()
    if not value:
        raise PydanticCustomError("required", f"{label} is required")
    if len(value) < min_length:
        raise PydanticCustomError(
            "too_short", f"{label} must be at least {min_length} characters"
        )
    if len(value) > max_length:
        raise PydanticCustomError(
            "too_long", f"{label} cannot be longer than {max_length} characters"
        )
    return value


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteUpdate(BaseModel):
    """
    What:  Body of PUT /api/notes/{id}.
    How:   Every field is optional; only fields present in the body are
           validated and applied (read them with `model_dump(exclude_unset=True)`).
           An explicit null for title/content/isPinned is rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    is_pinned: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return _clean_text(v, "Title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> str:
        return _clean_text(v, "Content", CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v: Any) -> str:
        """Blank or missing categories fall back to the default category."""
        if v is None:
            return DEFAULT_CATEGORY
        if not isinstance(v, str):
            raise PydanticCustomError("text_type", "Category must be text")
        v = v.strip()
        if len(v) > CATEGORY_MAX_LENGTH:
            raise PydanticCustomError(
                "too_long",
                f"Category cannot be longer than {CATEGORY_MAX_LENGTH} characters",
            )
        return v or DEFAULT_CATEGORY

    @field_validator("is_pinned", mode="before")
    @classmethod
    def validate_is_pinned(cls, v: Any) -> bool:
        """Accepts booleans, 0/1, and the strings "true"/"false"/"1"/"0"."""
        if isinstance(v, bool):
            return v
        if isinstance(v, int) and v in (0, 1):
            return bool(v)
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise PydanticCustomError("bool_type", "isPinned must be true or false")


class NoteCreate(NoteUpdate):
    """
    What:  Body of POST /api/notes.
    How:   title and content are required (missing ones are reported with
           the field's own "is required" message); category defaults to
           "General" and isPinned to false.
    """

    title: str = Field(default=None, validate_default=True)
    content: str = Field(default=None, validate_default=True)
    category: str = Field(default=None, validate_default=True)
    is_pinned: bool = False


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteOut(BaseModel):
    """Full representation of a stored note."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str
    content: str
    category: str
    is_pinned: bool
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last successful update (UTC ISO 8601)")

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class FieldErrorItem(BaseModel):
    field: str
    message: str


class Envelope(BaseModel):
    """
    What:  Uniform response wrapper used by every API response.
    Shape: {success, data?, message?, errors?, details?}; absent keys are
           omitted from the JSON body.
    """

    success: bool
    message: Optional[str] = None
    errors: Optional[List[FieldErrorItem]] = None
    details: Optional[str] = None


class NoteEnvelope(Envelope):
    data: Optional[NoteOut] = None


class NoteListEnvelope(Envelope):
    data: List[NoteOut] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════

_LOCATION_PREFIXES = {"body", "query", "path"}


def field_errors_from_pydantic(errors: Iterable[Dict[str, Any]]) -> List[FieldError]:
    """
    Converts pydantic error dicts into client-facing field errors.

    One error per field (the first rule that failed). Errors that do not
    point at a named field, such as a malformed JSON body, are reported
    under "body".
    """
    result: List[FieldError] = []
    seen = set()
    for err in errors:
        names = [
            part for part in err.get("loc", ())
            if isinstance(part, str) and part not in _LOCATION_PREFIXES
        ]
        field = names[-1] if names else "body"
        if field in seen:
            continue
        seen.add(field)
        result.append(FieldError(field=field, message=str(err.get("msg", "Invalid value"))))
    return result
