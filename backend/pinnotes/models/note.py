"""
PinNotes Backend — Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteStore for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - UUID primary key: generated in Python so every backend (PostgreSQL,
      SQLite) gets the same identifier format
    - title / content / category: lengths mirror the schema rules; the
      database limits are a backstop, the store validates first
    - is_pinned: priority flag used by clients to float notes to the top
    - created_at / updated_at: UTC with timezone, maintained by the store

    Index on updated_at DESC:
        The list endpoint always returns notes most-recently-updated first.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from pinnotes.constants import CATEGORY_MAX_LENGTH, DEFAULT_CATEGORY, TITLE_MAX_LENGTH
from pinnotes.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    Represents a single user note.

    Lifecycle:
        1. Created by the store with a fresh UUID and both timestamps set
        2. Updated in place; every successful update refreshes updated_at
        3. Hard-deleted; there is no tombstone
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier, assigned on creation and never changed",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    # TEXT: up to 5000 characters
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    category: Mapped[str] = mapped_column(
        String(CATEGORY_MAX_LENGTH),
        nullable=False,
        default=DEFAULT_CATEGORY,
        server_default=DEFAULT_CATEGORY,
    )

    is_pinned: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # All storage in UTC; conversion to local time happens in the client
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("idx_notes_updated_at", updated_at.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, title='{self.title}', "
            f"pinned={self.is_pinned}, updated_at='{self.updated_at}')>"
        )
