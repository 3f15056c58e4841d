"""
Custom exceptions for the tagwise application.

This module defines domain-specific exceptions for error handling
throughout the application: tag validation failures, repository
failures and the API error family rendered as RFC 7807 problems.
"""

from __future__ import annotations

from tagwise.api.schemas.responses import ErrorCode


class TagwiseError(Exception):
    """Base exception for all tagwise errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TagwiseError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class ValidationError(TagwiseError):
    """
    Exception raised for data validation failures.

    Raised when submitted tag text contains a name that is too long or
    contains characters that cannot be stored. Names are never silently
    truncated.

    Attributes
    ----------
    message : str
        Human-readable error message.
    field_name : str | None
        The name of the field that failed validation.
    invalid_value : object
        The value that failed validation.

    Examples
    --------
    >>> try:
    ...     parse_tag_names("ruby, " + "x" * 80, max_length=50)
    ... except ValidationError as e:
    ...     print(f"Invalid {e.field_name}: {e.invalid_value}")
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field_name: str | None = None,
        invalid_value: object = None,
    ) -> None:
        """
        Initialize ValidationError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Validation failed").
        field_name : str | None, optional
            The name of the field that failed validation (default: None).
        invalid_value : object, optional
            The value that failed validation (default: None).
        """
        self.field_name: str | None = field_name
        self.invalid_value: object = invalid_value
        super().__init__(message)


class RepositoryError(TagwiseError):
    """
    Exception raised for repository/database operation failures.

    This exception wraps database-related errors such as constraint
    violations when an article and its taggings are saved. The owning
    transaction is rolled back, so no partial save is visible.

    Attributes
    ----------
    message : str
        Human-readable error message.
    operation : str | None
        The database operation that failed (e.g., "insert", "update", "delete").
    entity_type : str | None
        The type of entity involved (e.g., "Article", "Tagging").
    original_error : Exception | None
        The original database exception that caused this error.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: str | None = None,
        entity_type: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize RepositoryError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Repository operation failed").
        operation : str | None, optional
            The database operation that failed (default: None).
        entity_type : str | None, optional
            The type of entity involved (default: None).
        original_error : Exception | None, optional
            The original database exception (default: None).
        """
        self.operation: str | None = operation
        self.entity_type: str | None = entity_type
        self.original_error: Exception | None = original_error
        super().__init__(message)


# =============================================================================
# API Layer Exceptions
# =============================================================================


class APIError(TagwiseError):
    """Base exception for API layer errors.

    Attributes
    ----------
    status_code : int
        HTTP status code for the error response (default: 500).
    error_code : ErrorCode
        Machine-readable error code for API consumers.
    message : str
        Human-readable error message.
    """

    status_code: int = 500
    _error_code_value: str = "INTERNAL_ERROR"

    @property
    def error_code(self) -> ErrorCode:
        """Get the error code as an ErrorCode enum."""
        return ErrorCode(self._error_code_value)


class NotFoundError(APIError):
    """Resource not found (404).

    Examples
    --------
    >>> raise NotFoundError(resource_type="Article", identifier="42")
    """

    status_code: int = 404
    _error_code_value: str = "NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        identifier: str,
        hint: str | None = None,
    ) -> None:
        self.resource_type = resource_type
        self.identifier = identifier
        message = f"{resource_type} '{identifier}' not found"
        if hint:
            message += f". {hint}"
        super().__init__(message)
