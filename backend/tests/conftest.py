"""
PinNotes Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with the
       schema created from the ORM metadata. API tests swap it into the app
       through FastAPI's dependency overrides, so no PostgreSQL is needed.

Fixture Hierarchy (all function-scoped):
    db_engine ── session_factory ─┬─ db_session   (store tests)
                                  └─ test_client  (HTTP tests)
    sample_note_payload: a valid create body
"""

import os

# Override settings for testing BEFORE any pinnotes imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_AUTO_CREATE"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pinnotes.database import Base, get_db_session
from pinnotes.main import app
from pinnotes.models.note import Note  # noqa: F401


@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine with the notes table created.

    StaticPool keeps a single connection, so every session sees the same
    in-memory database for the duration of the test.
    """
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """A session for calling the note store directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app over ASGITransport.

    The request session dependency is overridden to use the test database
    while keeping the commit-on-success / rollback-on-error behaviour.
    """

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_note_payload():
    return {
        "title": "Groceries",
        "content": "Milk, eggs and bread",
        "category": "Errands",
        "isPinned": False,
    }
