"""
Repository layer for data access patterns.

Repositories wrap SQLAlchemy queries for articles, tags and taggings and
leave transaction control to the session owner.
"""

from .article_repository import ArticleRepository
from .base import BaseRepository, BaseSQLAlchemyRepository
from .tag_repository import TagRepository
from .tagging_repository import TaggingRepository

__all__ = [
    "ArticleRepository",
    "BaseRepository",
    "BaseSQLAlchemyRepository",
    "TagRepository",
    "TaggingRepository",
]
