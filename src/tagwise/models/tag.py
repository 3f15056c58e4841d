"""
Tag models.

Defines Pydantic models for tags, tag links and tag cloud entries.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
    """Stored tag."""

    id: int = Field(..., description="Tag identifier")
    name: str = Field(..., min_length=1, description="Trimmed tag name")
    created_at: datetime | None = Field(
        default=None, description="When the tag was first referenced"
    )

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode for SQLAlchemy compatibility
    )


class TagLink(BaseModel):
    """Navigable reference from a tag name to its tagged-article lookup."""

    name: str = Field(..., description="Tag name as displayed")
    href: str = Field(..., description="Lookup target for articles with this tag")

    model_config = ConfigDict(frozen=True)


class TagCount(BaseModel):
    """Tag annotated with the number of articles referencing it."""

    name: str = Field(..., description="Tag name")
    count: int = Field(0, ge=0, description="Number of articles with this tag")

    model_config = ConfigDict(frozen=True)


class TagCloudEntry(BaseModel):
    """One tag of the tag cloud with its assigned size class."""

    name: str = Field(..., description="Tag name")
    count: int = Field(..., ge=0, description="Number of articles with this tag")
    size_class: str = Field(..., description="Display-weight label, small to large")
    bucket: int = Field(..., ge=0, description="Index of the size class")
    href: str = Field(..., description="Lookup target for articles with this tag")
