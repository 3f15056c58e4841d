"""
Database CLI commands for tagwise.

``db init`` creates the tables directly from the ORM metadata, which is
enough for SQLite; PostgreSQL deployments run ``alembic upgrade head``.
"""

from __future__ import annotations

import asyncio

import typer
from sqlalchemy.exc import SQLAlchemyError

from tagwise.cli.errors import display_success_panel, exit_on_database_error
from tagwise.config.database import db_manager

db_app = typer.Typer(
    name="db",
    help="Database setup commands",
    no_args_is_help=True,
)


def _run(action: str) -> None:
    async def run_action() -> None:
        try:
            if action == "reset":
                await db_manager.drop_tables()
            await db_manager.create_tables()
        finally:
            await db_manager.close()

    try:
        asyncio.run(run_action())
    except SQLAlchemyError as e:
        exit_on_database_error(
            e, f"{action} the database", hint="Check TAGWISE_DATABASE_URL"
        )


@db_app.command("init")
def init() -> None:
    """Create the articles, tags and taggings tables if missing."""
    _run("init")
    display_success_panel(f"Database ready at {db_manager.database_url}")


@db_app.command("reset")
def reset(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip the confirmation prompt"
    ),
) -> None:
    """Drop and recreate all tables. Deletes every article and tag."""
    if not yes:
        typer.confirm("This deletes all articles and tags. Continue?", abort=True)
    _run("reset")
    display_success_panel("Database reset", title="Reset")
