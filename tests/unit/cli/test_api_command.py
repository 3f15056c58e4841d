"""
Tests for the ``api start`` command.
"""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from tagwise.cli.main import app

runner = CliRunner()


def test_start_development_mode():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["api", "start", "--port", "9000"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "tagwise.api.main:app",
        host="127.0.0.1",
        port=9000,
        reload=True,
        log_level="info",
    )


def test_start_production_mode():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["api", "start", "--production"])

    assert result.exit_code == 0
    assert mock_run.call_args.kwargs["workers"] == 2
    assert "reload" not in mock_run.call_args.kwargs
