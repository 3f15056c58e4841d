"""Article API schemas.

Response wrappers around the article read model, following the standard
``data`` (+ ``pagination``) envelope.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from tagwise.api.schemas.responses import PaginationMeta
from tagwise.models.article import Article


class ArticleResponse(BaseModel):
    """Response wrapper for a single article."""

    data: Article


class ArticleListResponse(BaseModel):
    """Response wrapper for article lists (index and tag lookup)."""

    data: List[Article] = Field(default_factory=list)
    pagination: PaginationMeta
