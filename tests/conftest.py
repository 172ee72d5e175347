"""Pytest configuration and fixtures for the task tracker.

Tests run against an in-memory SQLite database (sqlite+aiosqlite). The
environment is set before tasktracker.main is imported because the module
builds the app (and reads settings) at import time. Each test that asks for
the database gets fresh, empty tables.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["DATABASE_CREATE_TABLES"] = "false"

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from tasktracker.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from tasktracker.infrastructure.persistence import database  # noqa: E402
from tasktracker.main import app  # noqa: E402


@pytest.fixture
async def test_database() -> AsyncIterator[None]:
    """Fresh in-memory database with all tables; engine disposed after the test."""
    await database.dispose_engine()
    await database.init_models()
    yield
    await database.dispose_engine()


@pytest.fixture
async def client(test_database: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI).

    raise_app_exceptions=False so unhandled errors come back as the 500
    response the generic handler renders, as a real server would send.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session(test_database: None) -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test."""
    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
