"""Mini README: Entry point CLI for launching the finwallet console.

This script exposes a Typer CLI whose ``run`` command loads the persisted
users, starts an interactive session on stdin/stdout and saves everything
again on logout or exit. Settings come from ``FINWALLET_*`` environment
variables; the options below override them for a single run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from finwallet.configuration import get_settings, normalise_log_level
from finwallet.interface import ConsoleSession
from finwallet.logging_utils import configure_root_logger, get_logger
from finwallet.services import FinanceService
from finwallet.storage import UserDataStorage

cli = typer.Typer(help="Track personal income and expenses across named wallets.")

LOGGER = get_logger(__name__)


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return normalise_log_level(value)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error


@cli.command()
def run(
    data_file: Optional[Path] = typer.Option(None, help="Snapshot file to load and save."),
    log_level: Optional[str] = typer.Option(
        None, help="Diagnostic log level (e.g. INFO).", callback=_validate_log_level
    ),
) -> None:
    """Start an interactive finance session."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    effective_data_file = data_file.expanduser() if data_file else settings.data_file
    LOGGER.debug(
        "Starting finwallet (%s) with data file %s", settings.environment, effective_data_file
    )

    storage = UserDataStorage(effective_data_file)
    service = FinanceService(storage, transfer_category=settings.transfer_category)
    session = ConsoleSession(service, max_auth_attempts=settings.max_auth_attempts)
    raise typer.Exit(code=session.run())


if __name__ == "__main__":
    cli()
