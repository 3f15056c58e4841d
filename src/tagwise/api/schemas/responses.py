"""API response envelope schemas."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import JSONResponse


class ErrorCode(str, Enum):
    """Standardized error codes for API responses.

    4xx Client Errors:
        NOT_FOUND: Resource does not exist (404)
        VALIDATION_ERROR: Request or tag validation failed (422)

    5xx Server Errors:
        INTERNAL_ERROR: Unexpected server error (500)
        DATABASE_ERROR: Database operation failed (500)
    """

    # 4xx Client Errors
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # 5xx Server Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


# RFC 7807 Constants and Utilities
ERROR_TYPE_BASE: str = "https://api.tagwise.dev/errors"
"""Base URI for constructing RFC 7807 type URIs."""


def get_error_type_uri(code: ErrorCode) -> str:
    """Generate RFC 7807 type URI from error code.

    Examples
    --------
    >>> get_error_type_uri(ErrorCode.NOT_FOUND)
    'https://api.tagwise.dev/errors/NOT_FOUND'
    """
    return f"{ERROR_TYPE_BASE}/{code.value}"


# RFC 7807 Error Title Mapping
ERROR_TITLES: dict[ErrorCode, str] = {
    ErrorCode.NOT_FOUND: "Resource Not Found",
    ErrorCode.VALIDATION_ERROR: "Validation Error",
    ErrorCode.INTERNAL_ERROR: "Internal Server Error",
    ErrorCode.DATABASE_ERROR: "Database Error",
}
"""Mapping from ErrorCode to human-readable RFC 7807 title."""

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(strict=True)

    total: int  # Total items matching query
    limit: int  # Items per page
    offset: int  # Current offset
    has_more: bool  # More items available (offset + limit < total)


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    model_config = ConfigDict(strict=True)

    data: T
    pagination: PaginationMeta | None = None


# RFC 7807 Problem Details Models


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response for API errors.

    Attributes
    ----------
    type : str
        URI identifying the problem type.
    title : str
        Short human-readable summary of the problem type.
    status : int
        HTTP status code (4xx or 5xx).
    detail : str
        Human-readable explanation of the specific problem occurrence.
    instance : str
        URI reference of the specific occurrence.
    code : str
        Application-specific error code from ErrorCode enum.
    request_id : str
        Unique request identifier for correlation and debugging.
    """

    type: str = Field(
        ...,
        description="URI identifying the problem type",
        examples=["https://api.tagwise.dev/errors/NOT_FOUND"],
    )
    title: str = Field(
        ...,
        description="Short human-readable summary",
        examples=["Resource Not Found"],
    )
    status: int = Field(
        ...,
        ge=400,
        le=599,
        description="HTTP status code",
        examples=[404],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation of the problem",
        examples=["Article '42' not found"],
    )
    instance: str = Field(
        ...,
        description="URI reference of the specific occurrence",
        examples=["/api/v1/articles/42"],
    )
    code: str = Field(
        ...,
        description="Application-specific error code",
        examples=["NOT_FOUND"],
    )
    request_id: str = Field(
        ...,
        description="Unique request identifier for correlation",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )


class FieldError(BaseModel):
    """Individual field validation error for RFC 7807 validation responses.

    Attributes
    ----------
    loc : list[str | int]
        Location of the error as a field path (e.g., ["body", "all_tags"]).
    msg : str
        Human-readable error message.
    type : str
        Error type identifier (e.g., "string_too_short").
    """

    loc: list[str | int] = Field(
        ...,
        description="Location of the error (field path)",
        examples=[["body", "all_tags"]],
    )
    msg: str = Field(
        ...,
        description="Error message",
        examples=["Tag name exceeds 50 characters"],
    )
    type: str = Field(
        ...,
        description="Error type identifier",
        examples=["value_error"],
    )


class ValidationProblemDetail(ProblemDetail):
    """RFC 7807 Problem Details with validation errors for 422 responses."""

    errors: list[FieldError] = Field(
        ...,
        description="List of field-level validation errors",
    )


class ProblemJSONResponse(JSONResponse):
    """JSONResponse subclass for RFC 7807 Problem Details.

    Sets the ``application/problem+json`` media type.
    """

    media_type = "application/problem+json"
