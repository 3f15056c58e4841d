"""
Article models.

Defines Pydantic models for article submission and display. The
``all_tags`` field is the virtual comma-separated tag string: on create it
drives tag resolution, on read it is derived from the stored taggings.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tag import TagLink


class ArticleBase(BaseModel):
    """Base model for articles."""

    author: str = Field(..., min_length=1, max_length=255, description="Article author")
    content: str = Field(..., min_length=1, description="Article body")

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: str) -> str:
        """Validate author name."""
        if not v.strip():
            raise ValueError("Author cannot be empty")
        return v.strip()

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate article content."""
        if not v.strip():
            raise ValueError("Content cannot be empty")
        return v


class ArticleCreate(ArticleBase):
    """Model for creating articles."""

    all_tags: str = Field(
        default="",
        max_length=2000,
        description="Comma-separated tag names, e.g. 'ruby, rails'",
    )


class Article(ArticleBase):
    """Full article model as returned to callers."""

    id: int = Field(..., description="Article identifier")
    created_at: datetime | None = Field(default=None, description="Submission time")
    all_tags: str = Field(default="", description="Tag names joined with ', '")
    tag_links: List[TagLink] = Field(
        default_factory=list, description="One link per tag, in stored order"
    )

    model_config = ConfigDict(
        from_attributes=True,
    )
