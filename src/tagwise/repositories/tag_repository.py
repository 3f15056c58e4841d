"""
Tag repository implementation.

Provides data access for tags: exact-name lookup, the conflict-safe
find-or-create used by the normalizer, and usage counts for the tag cloud.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.db.models import Tag as TagDB
from tagwise.db.models import Tagging as TaggingDB
from tagwise.models.tag import TagCount
from tagwise.repositories.base import BaseSQLAlchemyRepository

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO NOTHING support
_UPSERT_INSERTS: Dict[str, Any] = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class TagRepository(BaseSQLAlchemyRepository[TagDB, Dict[str, Any], Dict[str, Any]]):
    """Repository for tag operations."""

    def __init__(self) -> None:
        super().__init__(TagDB)

    async def get(self, session: AsyncSession, id: int) -> Optional[TagDB]:
        """Get tag by primary key."""
        result = await session.execute(select(TagDB).where(TagDB.id == id))
        return result.scalar_one_or_none()

    async def get_by_name(self, session: AsyncSession, name: str) -> Optional[TagDB]:
        """Get tag by exact (trimmed, case-sensitive) name."""
        result = await session.execute(select(TagDB).where(TagDB.name == name.strip()))
        return result.scalar_one_or_none()

    async def find_or_create(self, session: AsyncSession, name: str) -> TagDB:
        """
        Return the tag called *name*, creating it if it does not exist.

        The insert is ``ON CONFLICT (name) DO NOTHING`` followed by a fetch,
        so a tag created concurrently by another transaction is picked up
        instead of raising a uniqueness violation.

        Parameters
        ----------
        session : AsyncSession
            Database session.
        name : str
            Tag name; already trimmed and validated by the normalizer.

        Returns
        -------
        TagDB
            The existing or newly created tag.
        """
        name = name.strip()
        dialect_name = session.get_bind().dialect.name
        insert_fn = _UPSERT_INSERTS.get(dialect_name)

        if insert_fn is not None:
            stmt = (
                insert_fn(TagDB)
                .values(name=name)
                .on_conflict_do_nothing(index_elements=["name"])
            )
            result = await session.execute(stmt)
            if result.rowcount:
                logger.debug("Created tag %r", name)
        else:
            existing = await self.get_by_name(session, name)
            if existing is not None:
                return existing
            try:
                async with session.begin_nested():
                    session.add(TagDB(name=name))
                logger.debug("Created tag %r", name)
            except IntegrityError:
                logger.debug("Tag %r created concurrently, fetching", name)

        tag = await self.get_by_name(session, name)
        if tag is None:
            raise LookupError(f"Tag {name!r} missing after insert")
        return tag

    async def get_tag_counts(
        self, session: AsyncSession, include_unused: bool = False
    ) -> List[TagCount]:
        """
        Get every tag with the number of articles referencing it.

        Parameters
        ----------
        session : AsyncSession
            Database session.
        include_unused : bool
            Also return tags no article references any more (count 0).

        Returns
        -------
        list[TagCount]
            Tags ordered alphabetically by name.
        """
        usage_count = func.count(TaggingDB.article_id).label("usage_count")
        query = select(TagDB.name, usage_count).select_from(TagDB)
        if include_unused:
            query = query.outerjoin(TaggingDB, TaggingDB.tag_id == TagDB.id)
        else:
            query = query.join(TaggingDB, TaggingDB.tag_id == TagDB.id)
        query = query.group_by(TagDB.id, TagDB.name).order_by(TagDB.name)

        result = await session.execute(query)
        return [TagCount(name=row.name, count=row.usage_count) for row in result]

    async def get_popular_tags(
        self, session: AsyncSession, limit: int = 50
    ) -> List[TagCount]:
        """Get most used tags by article count."""
        usage_count = func.count(TaggingDB.article_id).label("usage_count")
        result = await session.execute(
            select(TagDB.name, usage_count)
            .join(TaggingDB, TaggingDB.tag_id == TagDB.id)
            .group_by(TagDB.id, TagDB.name)
            .order_by(usage_count.desc(), TagDB.name)
            .limit(limit)
        )
        return [TagCount(name=row.name, count=row.usage_count) for row in result]
