"""
Article repository implementation.

Provides data access for articles, including the tagged-article lookup.
Lists are ordered newest first and load taggings (with their tags) eagerly
so display strings can be built outside the session.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from tagwise.db.models import Article as ArticleDB
from tagwise.db.models import Tag as TagDB
from tagwise.db.models import Tagging as TaggingDB
from tagwise.repositories.base import BaseSQLAlchemyRepository


def _newest_first(query: Select) -> Select:
    return query.order_by(ArticleDB.created_at.desc(), ArticleDB.id.desc())


class ArticleRepository(
    BaseSQLAlchemyRepository[ArticleDB, Dict[str, Any], Dict[str, Any]]
):
    """Repository for article operations."""

    def __init__(self) -> None:
        super().__init__(ArticleDB)

    async def get(self, session: AsyncSession, id: int) -> Optional[ArticleDB]:
        """Get article by primary key with its tags loaded."""
        result = await session.execute(
            select(ArticleDB)
            .where(ArticleDB.id == id)
            .options(selectinload(ArticleDB.taggings))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_multi(
        self, session: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[ArticleDB]:
        """Get articles newest first with pagination."""
        query = _newest_first(
            select(ArticleDB).options(selectinload(ArticleDB.taggings))
        )
        result = await session.execute(query.offset(skip).limit(limit))
        return list(result.scalars().all())

    def _tagged_with(self, name: str) -> Select:
        return (
            select(ArticleDB)
            .join(TaggingDB, TaggingDB.article_id == ArticleDB.id)
            .join(TagDB, TagDB.id == TaggingDB.tag_id)
            .where(TagDB.name == name)
        )

    async def get_by_tag_name(
        self,
        session: AsyncSession,
        name: str,
        *,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ArticleDB]:
        """
        Get all articles tagged with *name*, newest first.

        The match is exact after trimming. An unknown or blank tag name
        returns an empty list rather than raising.
        """
        name = name.strip()
        if not name:
            return []

        query = _newest_first(
            self._tagged_with(name).options(selectinload(ArticleDB.taggings))
        ).offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await session.execute(query)
        return list(result.scalars().all())

    async def count_by_tag_name(self, session: AsyncSession, name: str) -> int:
        """Count articles tagged with *name*."""
        name = name.strip()
        if not name:
            return 0
        subquery = self._tagged_with(name).subquery()
        result = await session.execute(select(func.count()).select_from(subquery))
        return result.scalar() or 0
