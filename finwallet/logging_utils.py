"""Mini README: Application-wide logging helpers for finwallet.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - helper to install the handler and adjust the level.

Usage:
    Modules import ``get_logger`` to create contextual loggers that include
    module names. Diagnostic log lines go to stderr and stay separate from the
    text the console session writes for the user. Configuration happens once;
    later calls only change the level so the CLI can apply user settings after
    modules have already created their loggers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger once, then only update its level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
