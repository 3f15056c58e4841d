"""
Pytest configuration and fixtures for tagwise tests.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from tagwise.config.database import build_engine
from tagwise.config.settings import Settings
from tagwise.db.models import Base

IN_MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def mock_settings() -> Settings:
    """Settings pointing at an in-memory database."""
    return Settings(database_url=IN_MEMORY_DB_URL)


@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    In-memory SQLite engine with the schema created.

    A single shared connection (StaticPool) keeps the in-memory database
    alive for the whole test; foreign keys are enforced.
    """
    engine = build_engine(
        IN_MEMORY_DB_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(
    session_factory: async_sessionmaker,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide an async database session for testing.

    Rolls back anything left uncommitted on teardown.
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()
