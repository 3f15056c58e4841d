"""
Tag CLI commands for tagwise.

Commands for looking at tag usage: the weighted tag cloud and the most
used tags.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from tagwise.cli.errors import display_warning_panel, exit_on_database_error
from tagwise.config.database import db_manager
from tagwise.container import container
from tagwise.models.tag import TagCloudEntry, TagCount
from tagwise.repositories.tag_repository import TagRepository

logger = logging.getLogger(__name__)

console = Console()

tag_app = typer.Typer(
    name="tags",
    help="Tag usage and tag cloud",
    no_args_is_help=True,
)

# Rich styles from smallest to largest size class
_CLOUD_STYLES = ["dim", "white", "bold", "bold magenta"]


def _style_for(bucket: int, num_classes: int) -> str:
    if num_classes <= 1:
        return _CLOUD_STYLES[-1]
    index = round(bucket * (len(_CLOUD_STYLES) - 1) / (num_classes - 1))
    return _CLOUD_STYLES[index]


@tag_app.command("cloud")
def cloud(
    include_unused: bool = typer.Option(
        False, "--include-unused", help="Also show tags no article uses"
    ),
) -> None:
    """Show every tag with its usage count and size class."""

    async def run_cloud() -> list[TagCloudEntry]:
        try:
            async for session in db_manager.get_session():
                entries = await container.tag_cloud_service.build(
                    session, include_unused=include_unused
                )
            return entries
        finally:
            await db_manager.close()

    try:
        entries = asyncio.run(run_cloud())
    except SQLAlchemyError as e:
        exit_on_database_error(e, "build tag cloud")

    if not entries:
        display_warning_panel(
            "No tags found in database",
            title="No Tags",
            extra_info="Use 'tagwise articles add --tags ...' to tag an article",
        )
        return

    num_classes = len(container.tag_cloud_service.size_classes)
    table = Table(title="Tag Cloud", show_header=True, header_style="bold blue")
    table.add_column("Tag", style="cyan")
    table.add_column("Articles", style="green", justify="right")
    table.add_column("Size", style="yellow")

    for entry in entries:
        style = _style_for(entry.bucket, num_classes)
        table.add_row(
            f"[{style}]{escape(entry.name)}[/{style}]", f"{entry.count:,}", entry.size_class
        )

    console.print(table)


@tag_app.command("list")
def list_tags(
    limit: int = typer.Option(
        50, "--limit", "-l", help="Maximum number of tags to show"
    ),
) -> None:
    """List popular tags ordered by article count."""

    async def run_list() -> list[TagCount]:
        tag_repo = TagRepository()
        try:
            async for session in db_manager.get_session():
                popular = await tag_repo.get_popular_tags(session, limit=limit)
            return popular
        finally:
            await db_manager.close()

    try:
        popular_tags = asyncio.run(run_list())
    except SQLAlchemyError as e:
        exit_on_database_error(e, "list tags")

    if not popular_tags:
        display_warning_panel("No tags found in database", title="No Tags")
        return

    tag_table = Table(
        title=f"Popular Tags (showing top {len(popular_tags)})",
        show_header=True,
        header_style="bold blue",
    )
    tag_table.add_column("Rank", style="dim", width=6)
    tag_table.add_column("Tag", style="cyan", width=50)
    tag_table.add_column("Articles", style="green", width=12)

    for rank, tag in enumerate(popular_tags, 1):
        display_tag = tag.name[:47] + "..." if len(tag.name) > 50 else tag.name
        tag_table.add_row(str(rank), escape(display_tag), f"{tag.count:,}")

    console.print(tag_table)
