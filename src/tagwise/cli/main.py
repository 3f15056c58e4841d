"""
Main CLI entry point for tagwise.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from tagwise import __version__
from tagwise.cli.article_commands import article_app
from tagwise.cli.commands.api import api_app
from tagwise.cli.db_commands import db_app
from tagwise.cli.tag_commands import tag_app

console = Console()

app = typer.Typer(
    name="tagwise",
    help="Articles with free-text tags and a tag cloud",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db", help="Database setup commands")
app.add_typer(article_app, name="articles", help="Article commands")
app.add_typer(tag_app, name="tags", help="Tag commands")
app.add_typer(api_app, name="api", help="API server commands")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tagwise[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    tagwise - articles with free-text tags.

    Tag articles with comma-separated text, find articles by tag and see
    which tags are used most.
    """
    if version:
        console.print(f"tagwise v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'tagwise --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
