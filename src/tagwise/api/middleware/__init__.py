"""Middleware components for the tagwise API."""

from tagwise.api.middleware.request_id import (
    RequestIdFilter,
    RequestIdMiddleware,
    get_request_id,
    request_id_var,
)

__all__ = [
    "RequestIdFilter",
    "RequestIdMiddleware",
    "get_request_id",
    "request_id_var",
]
