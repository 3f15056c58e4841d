"""
Tagging repository implementation.

Manages the article-tag join rows. An article's tag list is always
replaced as a whole: rows for dropped tags are deleted, kept rows are
re-positioned and new rows are inserted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.db.models import Tagging as TaggingDB
from tagwise.repositories.base import BaseSQLAlchemyRepository


class TaggingRepository(
    BaseSQLAlchemyRepository[TaggingDB, Dict[str, Any], Dict[str, Any]]
):
    """Repository for tagging operations."""

    def __init__(self) -> None:
        super().__init__(TaggingDB)

    async def get(self, session: AsyncSession, id: Any) -> Optional[TaggingDB]:
        """Get tagging by composite key tuple (article_id, tag_id)."""
        if isinstance(id, tuple) and len(id) == 2:
            article_id, tag_id = id
            return await self.get_by_composite_key(session, article_id, tag_id)
        return None

    async def get_by_composite_key(
        self, session: AsyncSession, article_id: int, tag_id: int
    ) -> Optional[TaggingDB]:
        """Get tagging by composite key (article_id, tag_id)."""
        result = await session.execute(
            select(TaggingDB).where(
                and_(TaggingDB.article_id == article_id, TaggingDB.tag_id == tag_id)
            )
        )
        return result.scalar_one_or_none()

    async def get_by_article_id(
        self, session: AsyncSession, article_id: int
    ) -> List[TaggingDB]:
        """Get all taggings of an article in assignment order."""
        result = await session.execute(
            select(TaggingDB)
            .where(TaggingDB.article_id == article_id)
            .order_by(TaggingDB.position)
        )
        return list(result.scalars().unique().all())

    async def replace_article_tags(
        self, session: AsyncSession, article_id: int, tag_ids: Sequence[int]
    ) -> List[TaggingDB]:
        """
        Make *tag_ids* the complete, ordered tag list of an article.

        Parameters
        ----------
        session : AsyncSession
            Database session; the caller owns the transaction.
        article_id : int
            Article whose associations are rewritten.
        tag_ids : Sequence[int]
            Tag ids in display order; must not contain duplicates.

        Returns
        -------
        list[TaggingDB]
            The article's taggings after the update, in order.
        """
        existing = {
            tagging.tag_id: tagging
            for tagging in await self.get_by_article_id(session, article_id)
        }
        wanted = set(tag_ids)

        for tag_id, tagging in existing.items():
            if tag_id not in wanted:
                await session.delete(tagging)

        taggings: List[TaggingDB] = []
        for position, tag_id in enumerate(tag_ids):
            tagging = existing.get(tag_id)
            if tagging is None:
                tagging = TaggingDB(
                    article_id=article_id, tag_id=tag_id, position=position
                )
                session.add(tagging)
            else:
                tagging.position = position
            taggings.append(tagging)

        await session.flush()
        return taggings
