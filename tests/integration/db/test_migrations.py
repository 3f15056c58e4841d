"""
Tests for the Alembic migration against a temporary SQLite file.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ALEMBIC_INI = Path(__file__).resolve().parents[3] / "alembic.ini"


@pytest.fixture
def alembic_config(tmp_path) -> tuple[Config, str]:
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    config = Config(str(ALEMBIC_INI))
    config.cmd_opts = Namespace(x=[f"database_url={url}"])
    return config, url


def test_upgrade_creates_schema(alembic_config):
    config, url = alembic_config

    command.upgrade(config, "head")

    inspector = inspect(create_engine(url))
    assert {"articles", "tags", "taggings"} <= set(inspector.get_table_names())
    unique = inspector.get_unique_constraints("tags")
    assert [c["column_names"] for c in unique] == [["name"]]
    assert inspector.get_pk_constraint("taggings")["constrained_columns"] == [
        "article_id",
        "tag_id",
    ]


def test_downgrade_drops_schema(alembic_config):
    config, url = alembic_config

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    tables = set(inspect(create_engine(url)).get_table_names())
    assert not {"articles", "tags", "taggings"} & tables
