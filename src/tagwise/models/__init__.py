"""
Pydantic models for tagwise.

Request, read and value models shared by services, the API and the CLI.
"""

from __future__ import annotations

from .article import Article, ArticleBase, ArticleCreate
from .tag import Tag, TagCloudEntry, TagCount, TagLink

__all__ = [
    "Article",
    "ArticleBase",
    "ArticleCreate",
    "Tag",
    "TagCloudEntry",
    "TagCount",
    "TagLink",
]
