"""
Database models for tagwise.

Articles and tags are joined through an explicit Tagging table; the
comma-separated ``all_tags`` string seen by callers is never stored.
"""

from __future__ import annotations

import datetime

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

# Upper bound of the column; the enforced limit comes from settings
TAG_NAME_COLUMN_LENGTH = 255


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Article(Base):
    """User-submitted article."""

    __tablename__ = "articles"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Article content
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    taggings: Mapped[list["Tagging"]] = relationship(
        "Tagging",
        back_populates="article",
        order_by="Tagging.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def tags(self) -> list["Tag"]:
        """Associated tags in the order they were assigned."""
        return [tagging.tag for tagging in self.taggings]


class Tag(Base):
    """Uniquely named tag shared between articles."""

    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("name", name="uq_tags_name"),)

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Stored trimmed; matching is exact and case-sensitive
    name: Mapped[str] = mapped_column(String(TAG_NAME_COLUMN_LENGTH), nullable=False)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    taggings: Mapped[list["Tagging"]] = relationship("Tagging", back_populates="tag")


class Tagging(Base):
    """Join record attaching one tag to one article."""

    __tablename__ = "taggings"

    # Composite primary key
    article_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # Order of the tag in the article's tag list
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    article: Mapped["Article"] = relationship("Article", back_populates="taggings")
    tag: Mapped["Tag"] = relationship("Tag", back_populates="taggings", lazy="joined")


# Export all models
__all__ = [
    "Base",
    "Article",
    "Tag",
    "Tagging",
    "TAG_NAME_COLUMN_LENGTH",
]
