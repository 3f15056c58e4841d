"""Shared OpenAPI response definitions for RFC 7807 compliance.

Endpoints pass these to ``responses=`` so error bodies are documented as
``application/problem+json`` in the OpenAPI schema.
"""

from __future__ import annotations

from typing import Any

from tagwise.api.schemas.responses import ProblemDetail, ValidationProblemDetail

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

# Type alias for FastAPI responses parameter
ResponsesType = dict[int | str, dict[str, Any]]

NOT_FOUND_RESPONSE: ResponsesType = {
    404: {
        "model": ProblemDetail,
        "description": "Resource not found",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

VALIDATION_ERROR_RESPONSE: ResponsesType = {
    422: {
        "model": ValidationProblemDetail,
        "description": "Validation error",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

INTERNAL_ERROR_RESPONSE: ResponsesType = {
    500: {
        "model": ProblemDetail,
        "description": "Internal server error",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

GET_ITEM_ERRORS: ResponsesType = {
    **NOT_FOUND_RESPONSE,
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for GET single item endpoints (404, 422, 500)."""

LIST_ERRORS: ResponsesType = {
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for GET list/collection endpoints (422, 500)."""

CREATE_ERRORS: ResponsesType = {
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for POST create endpoints (422, 500)."""
