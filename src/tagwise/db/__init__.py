"""
Database module for tagwise.

Contains SQLAlchemy models and the Alembic migration environment.
"""

from __future__ import annotations

from tagwise.db.models import Article, Base, Tag, Tagging

__all__: list[str] = ["Article", "Base", "Tag", "Tagging"]
