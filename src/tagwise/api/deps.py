"""FastAPI dependencies for API endpoints."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.config.database import db_manager
from tagwise.container import container
from tagwise.services.article_service import ArticleService
from tagwise.services.tag_cloud import TagCloudService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for database session.

    Yields an async SQLAlchemy session that commits on success and rolls
    back on exception, so an article and its taggings are saved together
    or not at all.

    Yields
    ------
    AsyncSession
        An async SQLAlchemy session for database operations.
    """
    async for session in db_manager.get_session():
        yield session


def get_article_service() -> ArticleService:
    """Dependency returning the shared article service."""
    return container.article_service


def get_tag_cloud_service() -> TagCloudService:
    """Dependency returning the shared tag cloud service."""
    return container.tag_cloud_service
