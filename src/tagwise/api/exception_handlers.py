"""Centralized exception handlers for FastAPI with RFC 7807 compliance.

Domain exceptions raised anywhere below a route are converted here into
``application/problem+json`` responses, so every error the API returns has
the same shape.

RFC 7807 Reference: https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from tagwise.api.middleware.request_id import get_request_id
from tagwise.api.schemas.responses import (
    ERROR_TITLES,
    ErrorCode,
    FieldError,
    ProblemDetail,
    ProblemJSONResponse,
    ValidationProblemDetail,
    get_error_type_uri,
)
from tagwise.exceptions import APIError, RepositoryError, ValidationError

logger = logging.getLogger(__name__)

MAX_DETAIL_LENGTH = 4096
"""Maximum allowed length for detail messages before truncation."""

TRUNCATION_SUFFIX = "... (truncated)"


# =============================================================================
# Helper Functions
# =============================================================================


def _truncate_detail(detail: str) -> str:
    """Truncate *detail* to ``MAX_DETAIL_LENGTH`` including the suffix."""
    if len(detail) <= MAX_DETAIL_LENGTH:
        return detail
    truncate_at = MAX_DETAIL_LENGTH - len(TRUNCATION_SUFFIX)
    return detail[:truncate_at] + TRUNCATION_SUFFIX


def _get_request_id_with_fallback(request: Request | None = None) -> str:
    """Get request ID from the context variable, then ``request.state``.

    Returns
    -------
    str
        The request ID, or "-" if not available.
    """
    request_id = get_request_id()
    if request_id:
        return request_id

    if request is not None:
        state_request_id = getattr(request.state, "request_id", None)
        if state_request_id:
            return str(state_request_id)

    return "-"


def _problem_response(
    code: ErrorCode,
    status: int,
    detail: str,
    request: Request,
) -> ProblemJSONResponse:
    """Build a ProblemJSONResponse for *request*."""
    problem = ProblemDetail(
        type=get_error_type_uri(code),
        title=ERROR_TITLES.get(code, "Error"),
        status=status,
        detail=_truncate_detail(detail),
        instance=str(request.url.path),
        code=code.value,
        request_id=_get_request_id_with_fallback(request),
    )
    return ProblemJSONResponse(content=problem.model_dump(), status_code=status)


def _validation_response(
    errors: list[FieldError], detail: str, request: Request
) -> ProblemJSONResponse:
    """Build a 422 ProblemJSONResponse carrying field-level errors."""
    problem = ValidationProblemDetail(
        type=get_error_type_uri(ErrorCode.VALIDATION_ERROR),
        title=ERROR_TITLES[ErrorCode.VALIDATION_ERROR],
        status=422,
        detail=_truncate_detail(detail),
        instance=str(request.url.path),
        code=ErrorCode.VALIDATION_ERROR.value,
        request_id=_get_request_id_with_fallback(request),
        errors=errors,
    )
    return ProblemJSONResponse(content=problem.model_dump(), status_code=422)


# =============================================================================
# Exception Handlers
# =============================================================================


async def api_error_handler(request: Request, exc: APIError) -> ProblemJSONResponse:
    """Handle APIError subclasses (e.g. NotFoundError).

    The exception's own status code and message are used as-is.
    """
    return _problem_response(exc.error_code, exc.status_code, exc.message, request)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ProblemJSONResponse:
    """Handle Pydantic RequestValidationError and convert to RFC 7807 format.

    Field errors keep Pydantic's order; one field may appear several times.

    Parameters
    ----------
    request : Request
        The incoming FastAPI request.
    exc : RequestValidationError
        The Pydantic validation error.

    Returns
    -------
    ProblemJSONResponse
        RFC 7807 compliant JSON response with status 422 and errors array.
    """
    errors = [
        FieldError(
            loc=list(error.get("loc", [])),
            msg=error.get("msg", ""),
            type=error.get("type", ""),
        )
        for error in exc.errors()
    ]
    return _validation_response(errors, "Request validation failed", request)


async def tag_validation_error_handler(
    request: Request, exc: ValidationError
) -> ProblemJSONResponse:
    """Handle rejected tag text as a 422 on the offending body field.

    Nothing has been written when this is raised: tag names are checked
    before the article row is created.
    """
    field = exc.field_name or "body"
    errors = [
        FieldError(loc=["body", field], msg=exc.message, type="value_error")
    ]
    return _validation_response(errors, exc.message, request)


async def repository_error_handler(
    request: Request, exc: RepositoryError
) -> ProblemJSONResponse:
    """Handle RepositoryError with a generic detail message.

    The operation and entity are logged but not exposed to the client.
    """
    logger.error(
        "Repository error: %s (operation=%s, entity=%s)",
        exc.message,
        exc.operation,
        exc.entity_type,
        exc_info=exc.original_error,
    )
    return _problem_response(
        ErrorCode.DATABASE_ERROR, 500, "A database error occurred", request
    )


async def generic_error_handler(
    request: Request, exc: Exception
) -> ProblemJSONResponse:
    """Catch-all for unhandled exceptions; logs the full stack trace."""
    logger.exception("Unhandled exception: %s", exc)
    return _problem_response(
        ErrorCode.INTERNAL_ERROR, 500, "An unexpected error occurred", request
    )


# =============================================================================
# Handler Registration
# =============================================================================


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> register_exception_handlers(app)
    """
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, tag_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepositoryError, repository_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_error_handler)
