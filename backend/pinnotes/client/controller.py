"""
PinNotes Client — Note Actions Controller
===========================================

What:  The user-action handlers: load, create, edit, pin/unpin, delete.
Why:   Keeps UI state in one explicit object (ClientState) that every
       handler receives, instead of module-level element references.
How:   Each mutation awaits the API, then refetches and re-renders the whole
       list. No optimistic updates: what is shown is what the server holds.

Error policy:
    Handlers never raise. Transport failures (httpx.HTTPError) and
    non-success envelopes become user-visible messages: form problems go
    to `state.form_errors`, everything else to `state.alerts`.

Interaction hooks:
    Prompts and confirmations are plain callables supplied by the caller:
        prompt(label, default) -> Optional[str]   (None means cancelled)
        confirm(question) -> bool
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from pinnotes.client.api import ApiResult, NotesApiClient
from pinnotes.client.render import render_message, render_notes
from pinnotes.client.validation import edit_is_acceptable, validate_form
from pinnotes.constants import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

Prompt = Callable[[str, str], Optional[str]]
Confirm = Callable[[str], bool]

LOAD_FAILED_MESSAGE = "Failed to load notes."


@dataclass
class FormState:
    """Current values of the new-note form."""

    title: str = ""
    content: str = ""
    category: str = ""
    is_pinned: bool = False

    def clear(self) -> None:
        self.title = ""
        self.content = ""
        self.category = ""
        self.is_pinned = False


@dataclass
class ClientState:
    """Everything the page shows, owned by the caller and passed to each handler."""

    notes: List[Dict[str, Any]] = field(default_factory=list)
    html: str = ""
    form: FormState = field(default_factory=FormState)
    form_errors: List[str] = field(default_factory=list)
    alerts: List[str] = field(default_factory=list)

    def find_note(self, note_id: str) -> Optional[Dict[str, Any]]:
        for note in self.notes:
            if str(note.get("id")) == str(note_id):
                return note
        return None


class NotesController:
    """User-action handlers over a NotesApiClient."""

    def __init__(self, api: NotesApiClient):
        self.api = api

    async def refresh(self, state: ClientState) -> bool:
        """Refetches every note and re-renders the list."""
        try:
            result = await self.api.list_notes()
        except httpx.HTTPError as e:
            logger.error("Loading notes failed: %s", str(e))
            state.html = render_message(LOAD_FAILED_MESSAGE)
            return False

        if not result.ok or not isinstance(result.data, list):
            logger.error("Loading notes failed: %s", result.message)
            state.html = render_message(LOAD_FAILED_MESSAGE)
            return False

        state.notes = result.data
        state.html = render_notes(state.notes)
        return True

    async def submit_form(self, state: ClientState) -> bool:
        """Creates a note from the form; clears the form on success."""
        state.form_errors = []
        form = state.form

        client_errors = validate_form(form.title, form.content, form.category)
        if client_errors:
            state.form_errors = client_errors
            return False

        payload = {
            "title": form.title.strip(),
            "content": form.content.strip(),
            "category": form.category.strip() or DEFAULT_CATEGORY,
            "isPinned": form.is_pinned,
        }

        try:
            result = await self.api.create_note(payload)
        except httpx.HTTPError as e:
            logger.error("Creating note failed: %s", str(e))
            state.form_errors = ["Something went wrong while saving the note."]
            return False

        if not result.ok:
            state.form_errors = result.messages("Failed to create note")
            return False

        form.clear()
        await self.refresh(state)
        return True

    async def edit(self, state: ClientState, note_id: str, prompt: Prompt) -> bool:
        """
        Prompt-based edit: title first, then content, both pre-filled.

        Cancelling either prompt, or changing nothing, sends no request.
        Only the fields that actually changed are sent.
        """
        note = state.find_note(note_id)
        if note is None:
            state.alerts.append("This note is no longer available.")
            return False

        old_title = note.get("title") or ""
        old_content = note.get("content") or ""

        new_title = prompt("Edit title:", old_title)
        if new_title is None:
            return False
        new_content = prompt("Edit content:", old_content)
        if new_content is None:
            return False

        if not edit_is_acceptable(new_title, new_content):
            state.alerts.append("Title or content too short.")
            return False

        changes: Dict[str, Any] = {}
        if new_title.strip() != old_title:
            changes["title"] = new_title.strip()
        if new_content.strip() != old_content:
            changes["content"] = new_content.strip()
        if not changes:
            return False

        return await self._mutate(
            state,
            lambda: self.api.update_note(note_id, changes),
            failure_message="Failed to update note",
            network_message="Something went wrong while updating.",
        )

    async def toggle_pin(self, state: ClientState, note_id: str, button_label: str) -> bool:
        """Flips the pinned flag; the current state is read from the button label."""
        currently_pinned = "unpin" in button_label.lower()
        return await self._mutate(
            state,
            lambda: self.api.update_note(note_id, {"isPinned": not currently_pinned}),
            failure_message="Failed to update pin status",
            network_message="Something went wrong while updating pin status.",
        )

    async def delete(self, state: ClientState, note_id: str, confirm: Confirm) -> bool:
        """Deletes a note after the user confirms."""
        if not confirm("Delete this note?"):
            return False
        return await self._mutate(
            state,
            lambda: self.api.delete_note(note_id),
            failure_message="Failed to delete note",
            network_message="Something went wrong while deleting.",
        )

    async def _mutate(
        self,
        state: ClientState,
        call: Callable[[], Awaitable[ApiResult]],
        failure_message: str,
        network_message: str,
    ) -> bool:
        try:
            result = await call()
        except httpx.HTTPError as e:
            logger.error("%s: %s", failure_message, str(e))
            state.alerts.append(network_message)
            return False

        if not result.ok:
            state.alerts.extend(result.messages(failure_message))
            return False

        await self.refresh(state)
        return True
