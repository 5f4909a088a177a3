"""Mini README: Tests for the Typer entry point.

Structure:
    * test_unknown_log_level_is_a_usage_error - typos are reported by the CLI.
    * test_run_exits_cleanly_and_saves - ``x`` ends the session with code 0.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from finwallet.configuration import get_settings, normalise_log_level
from main_console import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_normalise_log_level() -> None:
    assert normalise_log_level(" info ") == "INFO"
    with pytest.raises(ValueError):
        normalise_log_level("chatty")


def test_unknown_log_level_is_a_usage_error(tmp_path) -> None:
    """A misspelt level is rejected before the session starts."""

    result = runner.invoke(cli, ["--log-level", "chatty", "--data-file", str(tmp_path / "u.json")])

    assert result.exit_code == 2
    assert not (tmp_path / "u.json").exists()


def test_run_exits_cleanly_and_saves(tmp_path) -> None:
    data_file = tmp_path / "u.json"

    result = runner.invoke(
        cli, ["--log-level", "warning", "--data-file", str(data_file)], input="x\n"
    )

    assert result.exit_code == 0
    assert data_file.exists()
