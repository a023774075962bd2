"""
PinNotes Client — Renderer and Form Controller
================================================

What:  The client side of PinNotes: calls the notes API, sorts and renders
       notes to HTML, and runs the create / edit / pin / delete flows.
How:   Handlers take an explicit ClientState and refetch the full list
       after every successful mutation; the server stays the authority.

Modules:
    - api.py:        httpx wrapper returning ApiResult envelopes
    - validation.py: advisory form checks mirroring the server rules
    - render.py:     display ordering and jinja2 HTML rendering
    - controller.py: ClientState and the user-action handlers
"""

from pinnotes.client.api import ApiResult, NotesApiClient
from pinnotes.client.controller import ClientState, FormState, NotesController
from pinnotes.client.render import render_notes, sort_for_display
from pinnotes.client.validation import validate_form

__all__ = [
    "ApiResult",
    "ClientState",
    "FormState",
    "NotesApiClient",
    "NotesController",
    "render_notes",
    "sort_for_display",
    "validate_form",
]
