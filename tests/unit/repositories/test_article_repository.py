"""
Tests for ArticleRepository functionality.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.db.models import Article as ArticleDB
from tagwise.repositories.article_repository import ArticleRepository

pytestmark = pytest.mark.asyncio


@pytest.fixture
def repository() -> ArticleRepository:
    return ArticleRepository()


@pytest.fixture
def mock_session() -> AsyncMock:
    return AsyncMock(spec=AsyncSession)


def _scalars_result(items) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = items
    return result


class TestArticleRepository:
    """Tests for ArticleRepository."""

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_blank_tag_returns_empty_without_query(
        self, repository, mock_session, name
    ):
        assert await repository.get_by_tag_name(mock_session, name) == []
        assert await repository.count_by_tag_name(mock_session, name) == 0
        mock_session.execute.assert_not_awaited()

    async def test_get_by_tag_name_orders_newest_first(self, repository, mock_session):
        articles = [ArticleDB(id=2, author="b", content="x")]
        mock_session.execute.return_value = _scalars_result(articles)

        assert await repository.get_by_tag_name(mock_session, " ruby ") == articles

        sql = str(mock_session.execute.call_args[0][0])
        assert "JOIN taggings" in sql
        assert "JOIN tags" in sql
        assert "ORDER BY articles.created_at DESC, articles.id DESC" in sql

    async def test_get_by_tag_name_applies_limit(self, repository, mock_session):
        mock_session.execute.return_value = _scalars_result([])

        await repository.get_by_tag_name(mock_session, "ruby", skip=5, limit=10)

        query = mock_session.execute.call_args[0][0]
        assert query._limit_clause is not None
        assert query._offset_clause is not None

    async def test_count_by_tag_name(self, repository, mock_session):
        result = MagicMock()
        result.scalar.return_value = 3
        mock_session.execute.return_value = result

        assert await repository.count_by_tag_name(mock_session, "ruby") == 3

    async def test_get_multi_newest_first(self, repository, mock_session):
        mock_session.execute.return_value = _scalars_result([])

        assert await repository.get_multi(mock_session, skip=0, limit=5) == []

        sql = str(mock_session.execute.call_args[0][0])
        assert "ORDER BY articles.created_at DESC, articles.id DESC" in sql
