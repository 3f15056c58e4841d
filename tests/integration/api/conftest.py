"""
Fixtures for API integration tests.

The app's ``get_db`` dependency is overridden with sessions from the
in-memory test database; each request commits or rolls back on its own.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tagwise.api.deps import get_db
from tagwise.api.main import app


@pytest_asyncio.fixture
async def async_client(
    session_factory: async_sessionmaker,
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client wired to the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
