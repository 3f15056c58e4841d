"""
Tests for request ID propagation.
"""

from __future__ import annotations

import logging
import uuid

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tagwise.api.middleware.request_id import (
    MAX_REQUEST_ID_LENGTH,
    REQUEST_ID_HEADER,
    RequestIdFilter,
    RequestIdMiddleware,
    _sanitize_request_id,
    get_request_id,
    request_id_var,
)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)

    @app.get("/echo")
    async def echo() -> dict[str, str]:
        return {"request_id": get_request_id()}

    return app


class TestSanitizeRequestId:
    """Tests for _sanitize_request_id."""

    def test_valid_value_kept(self):
        assert _sanitize_request_id("abc-123") == "abc-123"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_generates_uuid(self, value):
        uuid.UUID(_sanitize_request_id(value))

    def test_non_printable_replaced(self):
        generated = _sanitize_request_id("bad id\n")
        uuid.UUID(generated)

    def test_long_value_truncated(self):
        assert len(_sanitize_request_id("a" * 500)) == MAX_REQUEST_ID_LENGTH


class TestRequestIdFilter:
    """Tests for RequestIdFilter."""

    def test_placeholder_outside_request(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "-"

    def test_uses_context_value(self):
        token = request_id_var.set("ctx-id")
        try:
            record = logging.LogRecord("t", logging.INFO, __file__, 1, "m", None, None)
            RequestIdFilter().filter(record)
            assert record.request_id == "ctx-id"
        finally:
            request_id_var.reset(token)


@pytest.mark.asyncio
class TestRequestIdMiddleware:
    """Tests for RequestIdMiddleware."""

    async def test_header_echoed_and_visible_in_handler(self):
        async with AsyncClient(
            transport=ASGITransport(app=_app()), base_url="http://test"
        ) as client:
            response = await client.get("/echo", headers={REQUEST_ID_HEADER: "abc"})

        assert response.headers[REQUEST_ID_HEADER] == "abc"
        assert response.json() == {"request_id": "abc"}

    async def test_generated_when_missing(self):
        async with AsyncClient(
            transport=ASGITransport(app=_app()), base_url="http://test"
        ) as client:
            response = await client.get("/echo")

        generated = response.headers[REQUEST_ID_HEADER]
        uuid.UUID(generated)
        assert response.json() == {"request_id": generated}
