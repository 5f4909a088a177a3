"""Mini README: Centralised configuration model and helpers for finwallet.

Structure:
    * FinwalletSettings - Pydantic settings describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FINWALLET_*`` environment variables (or a
    local ``.env`` file). Defaults reproduce the classic behaviour: a single
    data file, five authentication attempts and the "Transfers" category for
    both legs of a fund transfer.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalise_log_level(value: str) -> str:
    """Upper-case a logging level name, rejecting names logging does not know."""

    normalised = value.strip().upper()
    if not isinstance(logging.getLevelName(normalised), int):
        raise ValueError(f"Unknown log level: {value}")
    return normalised

class FinwalletSettings(BaseSettings):
    """Runtime configuration for the finwallet console."""

    model_config = SettingsConfigDict(
        env_prefix="FINWALLET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label, reported in debug logs only.",
    )
    data_file: Path = Field(
        Path("data/persisted_data.json"),
        description="File holding the snapshot of every registered user.",
        validate_default=True,
    )
    max_auth_attempts: int = Field(
        5,
        description="How many sign-up or sign-in attempts are allowed before returning to the welcome screen.",
        ge=1,
    )
    transfer_category: str = Field(
        "Transfers",
        description="Category name used for both legs of a fund transfer.",
        min_length=1,
    )
    log_level: str = Field(
        "WARNING",
        description="Level for diagnostic logging written to stderr.",
    )

    @field_validator("data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and make sure the parent folder exists."""

        path = Path(value).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Accept only level names understood by the logging module."""

        return normalise_log_level(value)


@lru_cache()
def get_settings() -> FinwalletSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinwalletSettings()
