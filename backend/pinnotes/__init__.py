"""
PinNotes Backend — Application Package Initializer
===================================================

What: Marks the `pinnotes` directory as a Python package.
Why:  Enables module imports like `from pinnotes.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture, with the client package
    sitting on the other side of the HTTP boundary:

    ┌─────────────────────────────────────┐
    │        Client (pinnotes.client)     │  ← fetch, sort, render, form state
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns and envelopes
    ├─────────────────────────────────────┤
    │         Services (Note Store)       │  ← CRUD and write re-validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic rules
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM directly and the store never builds HTTP
    responses, so each layer can be tested on its own.
"""

__version__ = "1.0.0"
