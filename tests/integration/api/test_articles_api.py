"""
Integration tests for the article and tag endpoints.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio

BASE = "/api/v1"


async def _post(client, all_tags: str, author: str = "Ada", content: str = "Body"):
    return await client.post(
        f"{BASE}/articles",
        json={"author": author, "content": content, "all_tags": all_tags},
    )


class TestCreateArticleEndpoint:
    """POST /articles."""

    async def test_create_returns_201_with_normalized_tags(self, async_client):
        response = await _post(async_client, "ruby, , Rails ,ruby")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["author"] == "Ada"
        assert data["all_tags"] == "ruby, Rails"
        assert data["tag_links"] == [
            {"name": "ruby", "href": "/api/v1/tags/ruby/articles"},
            {"name": "Rails", "href": "/api/v1/tags/Rails/articles"},
        ]

    async def test_all_tags_optional(self, async_client):
        response = await async_client.post(
            f"{BASE}/articles", json={"author": "Ada", "content": "Body"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["all_tags"] == ""
        assert response.json()["data"]["tag_links"] == []

    async def test_invalid_tag_is_422_and_nothing_saved(self, async_client):
        response = await _post(async_client, "ruby, " + "x" * 51)

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["loc"] == ["body", "all_tags"]

        listing = await async_client.get(f"{BASE}/articles")
        assert listing.json()["pagination"]["total"] == 0

        cloud = await async_client.get(f"{BASE}/tags/cloud")
        assert cloud.json()["data"] == []

    async def test_missing_author_is_422(self, async_client):
        response = await async_client.post(
            f"{BASE}/articles", json={"content": "Body", "all_tags": "ruby"}
        )

        assert response.status_code == 422
        assert response.headers["content-type"].startswith("application/problem+json")


class TestListArticlesEndpoint:
    """GET /articles and GET /articles/{id}."""

    async def test_index_newest_first(self, async_client):
        await _post(async_client, "ruby", author="first")
        await _post(async_client, "python", author="second")

        response = await async_client.get(f"{BASE}/articles")

        assert response.status_code == 200
        body = response.json()
        assert [a["author"] for a in body["data"]] == ["second", "first"]
        assert body["pagination"] == {
            "total": 2,
            "limit": 20,
            "offset": 0,
            "has_more": False,
        }

    async def test_tag_filter(self, async_client):
        await _post(async_client, "ruby", author="rubyist")
        await _post(async_client, "python", author="pythonista")

        response = await async_client.get(f"{BASE}/articles", params={"tag": "ruby"})

        assert [a["author"] for a in response.json()["data"]] == ["rubyist"]

    async def test_pagination_has_more(self, async_client):
        for i in range(3):
            await _post(async_client, "ruby", author=f"a{i}")

        response = await async_client.get(
            f"{BASE}/articles", params={"limit": 2, "offset": 0}
        )

        assert len(response.json()["data"]) == 2
        assert response.json()["pagination"]["has_more"] is True

    async def test_get_article(self, async_client):
        created = (await _post(async_client, "ruby, rails")).json()["data"]

        response = await async_client.get(f"{BASE}/articles/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["all_tags"] == "ruby, rails"

    async def test_get_missing_article_is_404_problem(self, async_client):
        response = await async_client.get(f"{BASE}/articles/999")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["instance"] == f"{BASE}/articles/999"


class TestTagEndpoints:
    """GET /tags/cloud and GET /tags/{tag}/articles."""

    async def test_tagged_articles(self, async_client):
        await _post(async_client, "ruby", author="first")
        await _post(async_client, "ruby, rails", author="second")

        response = await async_client.get(f"{BASE}/tags/ruby/articles")

        assert response.status_code == 200
        assert [a["author"] for a in response.json()["data"]] == ["second", "first"]

    async def test_unknown_tag_returns_empty_list(self, async_client):
        await _post(async_client, "ruby")

        response = await async_client.get(f"{BASE}/tags/cobol/articles")

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["pagination"]["total"] == 0

    async def test_tag_link_with_slash_resolves(self, async_client):
        created = (await _post(async_client, "c/c++")).json()["data"]
        href = created["tag_links"][0]["href"]

        response = await async_client.get(href)

        assert response.status_code == 200
        assert [a["id"] for a in response.json()["data"]] == [created["id"]]

    @pytest.mark.parametrize("name", [".", ".."])
    async def test_dot_only_tag_link_resolves(self, async_client, name):
        await _post(async_client, "ruby", author="other")
        created = (await _post(async_client, name)).json()["data"]
        href = created["tag_links"][0]["href"]

        response = await async_client.get(href)

        assert response.status_code == 200
        assert [a["id"] for a in response.json()["data"]] == [created["id"]]
        assert response.json()["pagination"]["total"] == 1

    async def test_tag_cloud(self, async_client):
        for _ in range(9):
            await _post(async_client, "ruby")
        await _post(async_client, "ruby, rails")

        response = await async_client.get(f"{BASE}/tags/cloud")

        assert response.status_code == 200
        body = response.json()
        assert body["size_classes"] == ["css1", "css2", "css3", "css4"]
        assert [(e["name"], e["count"], e["size_class"]) for e in body["data"]] == [
            ("rails", 1, "css1"),
            ("ruby", 10, "css4"),
        ]


class TestHealthEndpoint:
    """GET /health."""

    async def test_health_reports_database(self, async_client):
        response = await async_client.get(f"{BASE}/health")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
