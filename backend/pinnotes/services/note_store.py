"""
PinNotes Backend — Note Store
==============================

What:  Create / list / update / delete operations over the `notes` table.
Why:   Keeps persistence and write validation in one place, independent of
       HTTP concerns.
How:   Every write passes through the pydantic note schemas before touching
       the ORM row, so the store enforces the field rules even for callers
       that bypass the API layer. Every successful write sets updated_at.
Who:   Called by the notes route handlers.

Design Decision:
    NoteStore is stateless: it receives the request's database session
    for each call. Commit/rollback belongs to the session dependency; the
    store only flushes so ids, defaults and constraint errors surface
    inside the call.

Concurrency:
    No locking. Two updates racing on the same note are last-write-wins.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinnotes.exceptions import (
    DatabaseError,
    NotFoundError,
    PinNotesError,
    ValidationError,
)
from pinnotes.models.note import Note
from pinnotes.schemas.note import NoteCreate, NoteUpdate, field_errors_from_pydantic

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_id(note_id: Any) -> Optional[uuid.UUID]:
    if isinstance(note_id, uuid.UUID):
        return note_id
    try:
        return uuid.UUID(str(note_id))
    except (TypeError, ValueError):
        return None


class NoteStore:
    """
    Document-style store for notes.

    Responsibilities:
        - create(): validate all fields, insert, assign id and timestamps
        - list_all(): every note, most recently updated first
        - update_by_id(): validate supplied fields, apply them, bump updated_at
        - delete_by_id(): hard delete, returning the removed note

    Error Handling Strategy:
        Rule violations raise ValidationError carrying one FieldError per
        failing field. Unknown or malformed ids raise NotFoundError.
        Anything else coming out of SQLAlchemy is logged and wrapped in
        DatabaseError so no driver detail reaches the client.
    """

    async def create(self, db: AsyncSession, fields: Mapping[str, Any]) -> Note:
        """
        Insert a new note.

        Args:
            db: Async database session (injected by FastAPI)
            fields: title, content and optionally category / isPinned,
                    under either wire or attribute names

        Raises:
            ValidationError: a field breaks its rule
            DatabaseError: the insert failed
        """
        try:
            values = NoteCreate.model_validate(dict(fields)).model_dump()
        except SchemaValidationError as e:
            raise ValidationError(errors=field_errors_from_pydantic(e.errors()))

        now = _utcnow()
        note = Note(
            id=uuid.uuid4(),
            title=values["title"],
            content=values["content"],
            category=values["category"],
            is_pinned=values["is_pinned"],
            created_at=now,
            updated_at=now,
        )
        try:
            db.add(note)
            await db.flush()
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"original_error": type(e).__name__},
            )

        logger.info("Note created: %s", note.id)
        return note

    async def list_all(self, db: AsyncSession) -> List[Note]:
        """
        Return every note, most recently updated first.

        No pagination: the whole collection is returned in one list.
        """
        try:
            result = await db.execute(
                select(Note).order_by(desc(Note.updated_at), desc(Note.created_at))
            )
            return list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"original_error": type(e).__name__},
            )

    async def update_by_id(
        self,
        db: AsyncSession,
        note_id: Any,
        fields: Mapping[str, Any],
    ) -> Note:
        """
        Apply a partial update to one note.

        Only the supplied fields are validated and written; the others keep
        their stored values. The body is validated before the lookup, so an
        invalid body is reported even when the id is unknown.

        Raises:
            ValidationError: a supplied field breaks its rule
            NotFoundError: no note has this id
            DatabaseError: the lookup or update failed
        """
        try:
            changes = NoteUpdate.model_validate(dict(fields)).model_dump(exclude_unset=True)
        except SchemaValidationError as e:
            raise ValidationError(errors=field_errors_from_pydantic(e.errors()))

        try:
            note = await self._get(db, note_id)

            for attr, value in changes.items():
                setattr(note, attr, value)

            # updated_at never moves backwards, even if the clock does
            now = _utcnow()
            previous = _as_utc(note.updated_at)
            note.updated_at = now if now > previous else previous

            await db.flush()
        except PinNotesError:
            raise
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id), "original_error": type(e).__name__},
            )

        logger.info("Note updated: %s (fields=%s)", note.id, sorted(changes))
        return note

    async def delete_by_id(self, db: AsyncSession, note_id: Any) -> Note:
        """
        Permanently remove one note and return it.

        Raises:
            NotFoundError: no note has this id (nothing is changed)
            DatabaseError: the delete failed
        """
        try:
            note = await self._get(db, note_id)
            await db.delete(note)
            await db.flush()
        except PinNotesError:
            raise
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id), "original_error": type(e).__name__},
            )

        logger.info("Note deleted: %s", note.id)
        return note

    async def _get(self, db: AsyncSession, note_id: Any) -> Note:
        parsed = _parse_id(note_id)
        if parsed is None:
            # A malformed id can never match a stored note
            raise NotFoundError(resource="note", resource_id=str(note_id))

        result = await db.execute(select(Note).where(Note.id == parsed))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
note_store = NoteStore()
