"""
Tests for RFC 7807 exception handlers.

A throwaway FastAPI app raises each domain exception so the handlers are
exercised through the real request/response cycle.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from tagwise.api.exception_handlers import (
    MAX_DETAIL_LENGTH,
    TRUNCATION_SUFFIX,
    _truncate_detail,
    register_exception_handlers,
)
from tagwise.api.middleware import RequestIdMiddleware
from tagwise.exceptions import NotFoundError, RepositoryError, ValidationError

class Payload(BaseModel):
    author: str


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)
    register_exception_handlers(app)

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundError(resource_type="Article", identifier="42")

    @app.get("/bad-tags")
    async def bad_tags() -> None:
        raise ValidationError(
            "Tag name exceeds 50 characters", field_name="all_tags", invalid_value="x"
        )

    @app.get("/db")
    async def db() -> None:
        raise RepositoryError(
            "constraint failed", operation="insert", entity_type="Article"
        )

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    @app.post("/payload")
    async def payload(body: Payload) -> dict[str, str]:
        return {"author": body.author}

    return app


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
class TestExceptionHandlers:
    """Problem responses for each exception type."""

    async def test_not_found(self, client):
        response = await client.get("/missing", headers={"X-Request-ID": "req-1"})

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["detail"] == "Article '42' not found"
        assert body["instance"] == "/missing"
        assert body["request_id"] == "req-1"

    async def test_tag_validation_error_is_422_on_field(self, client):
        response = await client.get("/bad-tags")

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"] == [
            {
                "loc": ["body", "all_tags"],
                "msg": "Tag name exceeds 50 characters",
                "type": "value_error",
            }
        ]

    async def test_request_validation_error(self, client):
        response = await client.post("/payload", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["detail"] == "Request validation failed"
        assert body["errors"][0]["loc"] == ["body", "author"]

    async def test_repository_error_hides_details(self, client):
        response = await client.get("/db")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "DATABASE_ERROR"
        assert "constraint" not in body["detail"]

    async def test_unhandled_exception(self, client):
        response = await client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "INTERNAL_ERROR"
        assert "secret" not in body["detail"]


class TestTruncateDetail:
    """Tests for _truncate_detail."""

    def test_short_detail_unchanged(self):
        assert _truncate_detail("short") == "short"

    def test_long_detail_truncated_to_limit(self):
        truncated = _truncate_detail("x" * (MAX_DETAIL_LENGTH + 10))
        assert len(truncated) == MAX_DETAIL_LENGTH
        assert truncated.endswith(TRUNCATION_SUFFIX)
