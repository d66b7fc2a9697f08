"""
ConfTrack Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with
       foreign keys enforced, so RESTRICT deletes and dangling references
       behave as they do on Postgres.

Fixture Hierarchy (all function-scoped):
    db_engine ─┬─ session_factory ─┬─ db_session       (service/repository tests)
               │                   └─ test_client      (HTTP tests, DB dependency overridden)
               └─ seeded rows: conference_42, session_99
"""

import os

# Override settings BEFORE any conftrack import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["WEBHOOK_TRANSACTION_MODE"] = "atomic"
os.environ["WEBHOOK_STRUCTURED_ERRORS"] = "false"

from datetime import datetime, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from conftrack.database import Base, get_db_session
from conftrack.models import Conference, ConferenceSession
from conftrack.schemas.webhook import RecordingStartedEvent


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with the full schema and foreign keys ON."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def conference_42(session_factory):
    """Conference id=42 under tenant 7."""
    async with session_factory() as session:
        conference = Conference(
            id=42,
            name="Weekly sync",
            host_user_id=5,
            tenant_id=7,
            start_time=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        )
        session.add(conference)
        await session.commit()
        return conference


@pytest_asyncio.fixture
async def session_99(session_factory, conference_42):
    """Session id=99 under conference 42, no recording yet."""
    async with session_factory() as session:
        row = ConferenceSession(
            id=99,
            conference_id=42,
            session_name="Morning block",
            start_time=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
            recording_url="",
            duration_seconds=0,
            file_size_mb=Decimal("0.00"),
        )
        session.add(row)
        await session.commit()
        return row


@pytest.fixture
def webhook_body():
    """The canonical recording.started payload (session 99, conference 42)."""
    return {
        "event": "recording.started",
        "data": {
            "recording_id": "r1",
            "conference_id": "42",
            "tenant_id": "7",
            "session_id": "99",
            "recording_url": "https://store/rec1.mp4",
            "title": "Standup",
            "start_time": "2024-01-01T10:00:00Z",
            "host_user_id": "5",
            "host_user_name": "Alice",
        },
    }


@pytest.fixture
def webhook_event(webhook_body):
    return RecordingStartedEvent.model_validate(webhook_body)


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport, with
    get_db_session pointed at the per-test database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from conftrack.main import app

    async def _override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
