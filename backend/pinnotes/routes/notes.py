"""
PinNotes Backend — Notes Route Handlers
=========================================

What:  The /api/notes resource: list, create, update, delete.
Why:   The only HTTP surface clients need to manage notes.
How:   Bodies are validated against NoteCreate / NoteUpdate, the work is
       delegated to the note store, and results are wrapped in the
       `{success, data|message}` envelope. Failures raise application
       exceptions which the global handlers in main.py turn into envelopes.

Endpoints:
    GET    /api/notes        → 200 {success, data: [Note]}
    POST   /api/notes        → 201 {success, data: Note}      | 400
    PUT    /api/notes/{id}   → 200 {success, data: Note}      | 400 | 404
    DELETE /api/notes/{id}   → 200 {success, message}         | 404

No authentication or ownership check: any caller may act on any note.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pinnotes.database import get_db_session
from pinnotes.schemas.note import (
    Envelope,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteOut,
    NoteUpdate,
)
from pinnotes.services.note_store import note_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

_ERROR_RESPONSES = {
    400: {"description": "Validation failed", "model": Envelope},
    404: {"description": "Note not found", "model": Envelope},
    500: {"description": "Server error", "model": Envelope},
}


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    response_model_exclude_none=True,
    responses={500: _ERROR_RESPONSES[500]},
    summary="List all notes",
    description="Returns every note, most recently updated first. No pagination.",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> NoteListEnvelope:
    notes = await note_store.list_all(db)
    return NoteListEnvelope(
        success=True,
        data=[NoteOut.model_validate(note) for note in notes],
    )


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={400: _ERROR_RESPONSES[400], 500: _ERROR_RESPONSES[500]},
    summary="Create a note",
    description=(
        "Creates a note. title (3-100 chars) and content (5-5000 chars) are required; "
        "category (max 50 chars) defaults to 'General' and isPinned to false."
    ),
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_store.create(db, payload.model_dump())
    return NoteEnvelope(success=True, data=NoteOut.model_validate(note))


@router.put(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    summary="Update a note",
    description=(
        "Partially updates a note. Every field is optional but validated when present; "
        "fields left out of the body keep their stored values."
    ),
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    """
    Args:
        note_id: Taken as a plain string so that a malformed id is reported
                 as 404 by the store rather than as a request validation error.
    """
    note = await note_store.update_by_id(db, note_id, payload.model_dump(exclude_unset=True))
    return NoteEnvelope(success=True, data=NoteOut.model_validate(note))


@router.delete(
    "/notes/{note_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    responses={404: _ERROR_RESPONSES[404], 500: _ERROR_RESPONSES[500]},
    summary="Delete a note",
    description="Permanently deletes a note. The deleted note is not echoed back.",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    await note_store.delete_by_id(db, note_id)
    return Envelope(success=True, message="Note deleted")
