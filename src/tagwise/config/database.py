"""
Database configuration and connection management.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tagwise.config.settings import settings
from tagwise.db.models import Base

# Metadata for migrations
metadata = Base.metadata


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str, echo: bool = False, **extra_kwargs: Any
) -> AsyncEngine:
    """Create an async engine, enabling foreign keys when running on SQLite.

    Extra keyword arguments (e.g. ``poolclass``) go to ``create_async_engine``.
    """
    engine_kwargs: dict[str, Any] = {"echo": echo, "future": True}
    if not database_url.startswith("sqlite"):
        engine_kwargs.update({"pool_pre_ping": True, "pool_recycle": 3600})
    engine_kwargs.update(extra_kwargs)

    engine = create_async_engine(database_url, **engine_kwargs)
    if database_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, database_url: str | None = None) -> None:
        self._database_url = database_url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None

    @property
    def database_url(self) -> str:
        return self._database_url or settings.database_url

    def get_engine(self) -> AsyncEngine:
        """Get or create async database engine."""
        if self._engine is None:
            self._engine = build_engine(
                self.database_url, echo=settings.debug or settings.db_log_queries
            )
        return self._engine

    def get_session_factory(self) -> async_sessionmaker:
        """Get or create session factory."""
        if self._session_factory is None:
            engine = self.get_engine()
            self._session_factory = async_sessionmaker(
                bind=engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_factory

    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session.

        The session is one transaction: it commits when the consumer
        finishes without error and rolls back otherwise.
        """
        session_factory = self.get_session_factory()
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
        self._session_factory = None

    async def create_tables(self) -> None:
        """Create database tables."""
        engine = self.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop database tables."""
        engine = self.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)


# Global database manager instance
db_manager = DatabaseManager()
