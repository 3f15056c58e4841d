"""
Tests for the tagwise exception hierarchy.
"""

from __future__ import annotations

from tagwise.api.schemas.responses import ErrorCode
from tagwise.exceptions import (
    APIError,
    NotFoundError,
    RepositoryError,
    TagwiseError,
    ValidationError,
)


class TestDomainErrors:
    """Tests for ValidationError and RepositoryError."""

    def test_validation_error_carries_field(self):
        error = ValidationError("too long", field_name="all_tags", invalid_value="x")

        assert isinstance(error, TagwiseError)
        assert error.message == "too long"
        assert error.field_name == "all_tags"
        assert error.invalid_value == "x"

    def test_repository_error_wraps_original(self):
        original = RuntimeError("unique violation")
        error = RepositoryError(
            "save failed", operation="insert", entity_type="Article", original_error=original
        )

        assert error.original_error is original
        assert str(error) == "save failed"


class TestAPIErrors:
    """Tests for the API error family."""

    def test_base_error_is_internal(self):
        error = APIError("problem")

        assert error.status_code == 500
        assert error.error_code is ErrorCode.INTERNAL_ERROR

    def test_not_found_message(self):
        error = NotFoundError("Article", "42", hint="Check the id.")

        assert isinstance(error, APIError)
        assert error.status_code == 404
        assert error.error_code is ErrorCode.NOT_FOUND
        assert error.message == "Article '42' not found. Check the id."
        assert (error.resource_type, error.identifier) == ("Article", "42")

    def test_not_found_without_hint(self):
        assert NotFoundError("Article", "7").message == "Article '7' not found"
