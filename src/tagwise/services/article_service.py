"""
Article service.

Creates articles together with their tags and lists them, optionally
filtered by tag. A create is one transaction: the article row, any new
tags and the taggings are flushed together and rolled back together.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.db.models import Article as ArticleDB
from tagwise.exceptions import RepositoryError
from tagwise.models.article import Article, ArticleCreate
from tagwise.repositories.article_repository import ArticleRepository
from tagwise.services.tag_formatter import display_string, tag_links
from tagwise.services.tag_normalization import TagNormalizationService

logger = logging.getLogger(__name__)


class ArticleService:
    """Article creation, lookup and presentation."""

    def __init__(
        self,
        normalizer: TagNormalizationService,
        base_path: str = "",
        article_repository: Optional[ArticleRepository] = None,
    ) -> None:
        self.normalizer = normalizer
        self.base_path = base_path
        self.article_repository = article_repository or ArticleRepository()

    async def create_article(
        self, session: AsyncSession, article_in: ArticleCreate
    ) -> ArticleDB:
        """
        Store a new article and attach the tags named in ``all_tags``.

        Parameters
        ----------
        session : AsyncSession
            Database session; committed or rolled back by its owner.
        article_in : ArticleCreate
            Submitted author, content and raw tag text.

        Returns
        -------
        ArticleDB
            The stored article with its taggings loaded.

        Raises
        ------
        ValidationError
            If a tag name is invalid. Raised before anything is written.
        RepositoryError
            If a database constraint rejects the save.
        """
        # Fail on bad tag text before the article row exists
        self.normalizer.parse(article_in.all_tags)

        try:
            article = await self.article_repository.create(
                session, obj_in=article_in.model_dump(exclude={"all_tags"})
            )
            tags = await self.normalizer.assign(session, article, article_in.all_tags)
        except IntegrityError as e:
            raise RepositoryError(
                "Failed to save article",
                operation="insert",
                entity_type="Article",
                original_error=e,
            ) from e

        logger.info(
            "Created article %s by %s with %d tag(s)",
            article.id,
            article.author,
            len(tags),
        )
        stored = await self.article_repository.get(session, article.id)
        if stored is None:
            raise RepositoryError(
                f"Article {article.id} missing after insert",
                operation="select",
                entity_type="Article",
            )
        return stored

    async def get_article(
        self, session: AsyncSession, article_id: int
    ) -> Optional[ArticleDB]:
        """Get one article with its tags."""
        return await self.article_repository.get(session, article_id)

    async def list_articles(
        self,
        session: AsyncSession,
        tag: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Tuple[List[ArticleDB], int]:
        """
        List articles newest first, optionally only those tagged *tag*.

        Returns
        -------
        tuple[list[ArticleDB], int]
            The requested page and the total number of matching articles.
            An unknown tag gives ``([], 0)``.
        """
        if tag is not None:
            articles = await self.article_repository.get_by_tag_name(
                session, tag, skip=skip, limit=limit
            )
            total = await self.article_repository.count_by_tag_name(session, tag)
        else:
            articles = await self.article_repository.get_multi(
                session, skip=skip, limit=limit
            )
            total = await self.article_repository.count(session)
        return articles, total

    def to_schema(self, article: ArticleDB) -> Article:
        """Build the read model with the derived tag string and links."""
        all_tags = display_string(article.tags)
        return Article(
            id=article.id,
            author=article.author,
            content=article.content,
            created_at=article.created_at,
            all_tags=all_tags,
            tag_links=tag_links(all_tags, base_path=self.base_path),
        )
