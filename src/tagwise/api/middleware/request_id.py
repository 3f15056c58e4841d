"""Request ID middleware for log correlation.

Every request carries an ID taken from the ``X-Request-ID`` header, or a
fresh UUID v4 when the header is missing or unusable. The ID is kept in a
context variable so log records and problem responses can include it
without the request object being passed around, and it is echoed back in
the response headers.
"""

from __future__ import annotations

import contextvars
import logging
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 128

REQUEST_ID_HEADER = "X-Request-ID"

# Empty string means "outside a request"
request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default=""
)


def get_request_id() -> str:
    """Return the current request ID, or ``""`` outside a request."""
    return request_id_var.get()


def _sanitize_request_id(header_value: str | None) -> str:
    """Accept a client-supplied request ID or generate a new one.

    Parameters
    ----------
    header_value : str | None
        The raw ``X-Request-ID`` header value.

    Returns
    -------
    str
        The header value if it is printable ASCII (truncated to
        ``MAX_REQUEST_ID_LENGTH``), otherwise a new UUID v4.
    """
    if not header_value:
        return str(uuid.uuid4())

    if not all(33 <= ord(c) <= 126 for c in header_value):
        logger.warning(
            "X-Request-ID contains non-ASCII-printable characters, generating new ID"
        )
        return str(uuid.uuid4())

    return header_value[:MAX_REQUEST_ID_LENGTH]


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Set the request ID context for each request and echo it back.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> app.add_middleware(RequestIdMiddleware)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = _sanitize_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)
        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)


class RequestIdFilter(logging.Filter):
    """Logging filter adding ``request_id`` to every record.

    Lets formatters use ``%(request_id)s``; records logged outside a
    request get ``"-"``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
