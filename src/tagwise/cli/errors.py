"""
Standardized error message helpers for CLI commands.

Error Format:
    Title -> Problem -> Expected -> Got -> Hint

Examples:
    >>> format_error("Not Found", "Article 42 does not exist")
    'Error: Not Found: Article 42 does not exist'

    >>> format_error(
    ...     "Validation",
    ...     "Tag name exceeds 50 characters",
    ...     expected="Tag names of at most 50 characters",
    ... )
    'Error: Validation: Tag name exceeds 50 characters\\n   Expected: Tag names of at most 50 characters'
"""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# Module-level console for CLI error display
console = Console()


class ErrorCategory:
    """
    Standard error categories for CLI commands.

    - NOT_FOUND: Resource does not exist in database
    - VALIDATION: Input format or value validation failed
    - DATABASE: Database operation failed
    """

    NOT_FOUND = "Not Found"
    VALIDATION = "Validation"
    DATABASE = "Database"


EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2


def get_exit_code_for_category(category: str) -> int:
    """
    Map error category to appropriate exit code.

    Examples
    --------
    >>> get_exit_code_for_category(ErrorCategory.VALIDATION)
    1
    >>> get_exit_code_for_category(ErrorCategory.DATABASE)
    2
    """
    category_to_exit_code = {
        ErrorCategory.NOT_FOUND: EXIT_USER_ERROR,
        ErrorCategory.VALIDATION: EXIT_USER_ERROR,
        ErrorCategory.DATABASE: EXIT_SYSTEM_ERROR,
    }
    return category_to_exit_code.get(category, EXIT_USER_ERROR)


def format_error(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
) -> str:
    """
    Format error message in the standard multi-part format.

    Parameters
    ----------
    category : str
        Error category; use ErrorCategory constants for consistency.
    message : str
        Human-readable error description.
    expected : Optional[str]
        Description of expected format/value (optional).
    got : Optional[str]
        Actual value that was received (optional).
    hint : Optional[str]
        Actionable suggestion for resolving the error (optional).

    Returns
    -------
    str
        Formatted error message string.
    """
    lines = [f"Error: {category}: {message}"]

    if expected is not None:
        lines.append(f"   Expected: {expected}")

    if got is not None:
        lines.append(f"   Got: {got}")

    if hint is not None:
        lines.append(f"   Hint: {hint}")

    return "\n".join(lines)


def display_error_panel(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """Display formatted error in a red Rich panel."""
    formatted = format_error(category, message, expected, got, hint)
    console.print(
        Panel(
            f"[red]{escape(formatted)}[/red]",
            title=title,
            border_style="red",
        )
    )


def display_success_panel(
    message: str,
    title: str = "Success",
    extra_info: Optional[str] = None,
) -> None:
    """Display success message in a green Rich panel."""
    content = f"[green]{message}[/green]"
    if extra_info:
        content += f"\n\n{extra_info}"

    console.print(Panel(content, title=title, border_style="green"))


def display_warning_panel(
    message: str,
    title: str = "Warning",
    extra_info: Optional[str] = None,
) -> None:
    """Display warning message in a yellow Rich panel."""
    content = f"[yellow]{message}[/yellow]"
    if extra_info:
        content += f"\n\n{extra_info}"

    console.print(Panel(content, title=title, border_style="yellow"))


def exit_on_database_error(
    error: SQLAlchemyError,
    action: str,
    hint: str = "Run 'tagwise db init' first",
) -> NoReturn:
    """Report a failed database *action* and exit with the database code."""
    logger.error("Could not %s: %s", action, error)
    display_error_panel(
        ErrorCategory.DATABASE,
        f"Could not {action}: {error.__class__.__name__}",
        hint=hint,
    )
    raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.DATABASE))
