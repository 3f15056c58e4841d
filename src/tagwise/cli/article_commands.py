"""
Article CLI commands for tagwise.

``articles add`` stores an article with comma-separated tags;
``articles list`` prints the index, optionally filtered by one tag.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import pydantic
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from tagwise.cli.errors import (
    ErrorCategory,
    display_error_panel,
    display_success_panel,
    display_warning_panel,
    exit_on_database_error,
    get_exit_code_for_category,
)
from tagwise.config.database import db_manager
from tagwise.container import container
from tagwise.exceptions import RepositoryError, ValidationError
from tagwise.models.article import Article, ArticleCreate

logger = logging.getLogger(__name__)

console = Console()

article_app = typer.Typer(
    name="articles",
    help="Create and list tagged articles",
    no_args_is_help=True,
)


@article_app.command("add")
def add_article(
    author: str = typer.Option(..., "--author", "-a", help="Article author"),
    content: str = typer.Option(..., "--content", "-c", help="Article body"),
    tags: str = typer.Option(
        "", "--tags", "-t", help="Comma-separated tags, e.g. 'ruby, rails'"
    ),
) -> None:
    """Create an article and attach its tags."""
    try:
        article_in = ArticleCreate(author=author, content=content, all_tags=tags)
    except pydantic.ValidationError as e:
        display_error_panel(
            ErrorCategory.VALIDATION,
            "; ".join(error["msg"] for error in e.errors()),
        )
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.VALIDATION))

    async def run_add() -> Article:
        service = container.article_service
        try:
            async for session in db_manager.get_session():
                article = await service.create_article(session, article_in)
                created = service.to_schema(article)
            return created
        finally:
            await db_manager.close()

    try:
        created = asyncio.run(run_add())
    except ValidationError as e:
        display_error_panel(
            ErrorCategory.VALIDATION,
            e.message,
            expected="Comma-separated tag names without control characters",
        )
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.VALIDATION))
    except RepositoryError as e:
        logger.error("Failed to save article: %s", e.original_error)
        display_error_panel(ErrorCategory.DATABASE, e.message)
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.DATABASE))
    except SQLAlchemyError as e:
        exit_on_database_error(e, "save article")

    display_success_panel(
        f"Created article {created.id} by {created.author}",
        title="Article Created",
        extra_info=f"Tags: {escape(created.all_tags) or '(none)'}",
    )


@article_app.command("list")
def list_articles(
    tag: Optional[str] = typer.Option(
        None, "--tag", "-t", help="Only articles carrying this exact tag"
    ),
    limit: int = typer.Option(20, "--limit", "-l", help="Maximum number of articles"),
) -> None:
    """List articles newest first."""

    async def run_list() -> tuple[list[Article], int]:
        service = container.article_service
        try:
            async for session in db_manager.get_session():
                articles, total = await service.list_articles(
                    session, tag=tag, limit=limit
                )
                rows = [service.to_schema(article) for article in articles]
            return rows, total
        finally:
            await db_manager.close()

    try:
        articles, total = asyncio.run(run_list())
    except SQLAlchemyError as e:
        exit_on_database_error(e, "list articles")

    if not articles:
        message = f"No articles tagged '{tag}'" if tag else "No articles yet"
        display_warning_panel(message, title="No Articles")
        return

    title = f"Articles tagged '{tag}'" if tag else "Articles"
    table = Table(
        title=f"{title} (showing {len(articles)} of {total})",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Author", style="cyan")
    table.add_column("Tags", style="green")
    table.add_column("Created", style="magenta")

    for article in articles:
        created = article.created_at.strftime("%Y-%m-%d %H:%M") if article.created_at else ""
        table.add_row(
            str(article.id), escape(article.author), escape(article.all_tags), created
        )

    console.print(table)
