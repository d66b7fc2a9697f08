"""
ConfTrack Backend: Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, declarative base, the FastAPI
       session dependency and the bounded datastore-call helper.
How:   One async engine per process with connection pooling; one session per
       request that commits on success and rolls back on error.
Who:   Used by route handlers via Depends(get_db_session) and by repositories.

Connection Pooling:
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600 on Postgres.
    SQLite URLs (tests, local experiments) use SQLAlchemy's default pool and
    take no pool sizing arguments.
"""

import asyncio
import logging
from typing import Any, AsyncGenerator, Awaitable, Dict, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from conftrack.config import settings
from conftrack.exceptions import ConstraintViolationError, DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_engine_kwargs() -> Dict[str, Any]:
    """Engine configuration for the configured URL."""
    kwargs: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if settings.is_sqlite:
        return kwargs
    kwargs.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return kwargs


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **get_engine_kwargs())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit without a
# lazy reload (which would fail outside the async greenlet context)
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata; Alembic reads it for --autogenerate.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits whatever the handler left pending
        4. On error: rolls back, then re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)

    Services that need explicit transaction boundaries (the webhook) commit
    and roll back themselves; the final commit here is then a no-op.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Bounded Datastore Calls ───────────────────────────────────────────────
async def run_bounded(awaitable: Awaitable[T], operation: str) -> T:
    """
    Await a datastore call with the configured timeout and translate failures.

    What:    Wraps execute / flush / commit / delete calls made by repositories
             and services.
    How:     asyncio.wait_for with settings.db_operation_timeout; SQLAlchemy
             errors become application exceptions.

    Raises:
        ConstraintViolationError: IntegrityError (foreign key, NOT NULL, ...)
        DatabaseError: timeout, lost connection, any other SQLAlchemyError
    """
    timeout = settings.db_operation_timeout
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as exc:
        logger.error("Datastore call '%s' exceeded %.1fs", operation, timeout)
        raise DatabaseError(
            context={"operation": operation, "timeout_seconds": timeout},
        ) from exc
    except IntegrityError as exc:
        logger.warning("Integrity error during '%s': %s", operation, exc.orig)
        raise ConstraintViolationError(
            context={"operation": operation, "original_error": type(exc.orig).__name__},
        ) from exc
    except SQLAlchemyError as exc:
        logger.error("Datastore call '%s' failed: %s", operation, str(exc))
        raise DatabaseError(
            context={"operation": operation, "original_error": type(exc).__name__},
        ) from exc


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan shutdown."""
    await engine.dispose()
