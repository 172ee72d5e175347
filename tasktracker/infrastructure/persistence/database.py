"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (get_db /
get_db_transactional) so import does not trigger Settings validation.

Schema: there is no migration tool in this service; init_models() creates
the tables from ORM metadata (called at startup when DATABASE_CREATE_TABLES
is set, and by the test fixtures).
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from tasktracker.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _engine_kwargs(database_url: str) -> dict[str, Any]:
    """Pool and driver options per backend.

    SQLite in-memory databases live inside a single connection, so they get a
    StaticPool; server databases get a sized queue pool.
    """
    settings = get_settings()
    if database_url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or "mode=memory" in database_url:
            kwargs["poolclass"] = StaticPool
        return kwargs
    connect_args: dict[str, Any] = {}
    if "asyncpg" in database_url:
        connect_args["command_timeout"] = (
            settings.db_command_timeout
            if settings.db_command_timeout is not None
            else 60
        )
    return {
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size if settings.db_pool_size is not None else 10,
        "max_overflow": (
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        ),
        "pool_recycle": 3600,
        "connect_args": connect_args,
    }


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        **_engine_kwargs(settings.database_url),
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def get_engine() -> Any:
    """Return the process-wide AsyncEngine, creating it if needed."""
    _ensure_engine()
    return engine


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def init_models() -> None:
    """Create all tables registered on Base.metadata (idempotent)."""
    # Register models on Base.metadata before create_all.
    from tasktracker.infrastructure.persistence import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory (next use recreates them)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, PATCH, DELETE endpoints.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
