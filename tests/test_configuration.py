"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from finwallet.configuration import FinwalletSettings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_classic_behaviour(tmp_path) -> None:
    settings = get_settings()

    assert settings.max_auth_attempts == 5
    assert settings.transfer_category == "Transfers"
    assert settings.log_level == "WARNING"
    assert settings.data_file == (tmp_path / "data" / "persisted_data.json").resolve()
    assert settings.data_file.parent.is_dir()


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("FINWALLET_DATA_FILE", str(tmp_path / "store" / "db.json"))
    monkeypatch.setenv("FINWALLET_MAX_AUTH_ATTEMPTS", "2")
    monkeypatch.setenv("FINWALLET_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.data_file.name == "db.json"
    assert settings.max_auth_attempts == 2
    assert settings.log_level == "DEBUG"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        FinwalletSettings(max_auth_attempts=0)
    with pytest.raises(ValidationError):
        FinwalletSettings(log_level="chatty")
