"""Mini README: Logging helpers shared by the expense ledger modules.

Structure:
    * configure_root_logger - installs the root handler once and applies levels.
    * get_logger - module logger factory that guarantees the handler exists.

Usage:
    Modules call ``get_logger(__name__)`` at import time and keep the result
    in a module-level ``LOGGER``, which installs the handler at the default
    INFO level. ``configure_root_logger(level)`` may be called again at any
    point to change the root level; ``Ledger.from_settings`` does this with
    ``LedgerSettings.log_level``. The handler itself is only ever added once.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach the stream handler on first use and set ``level`` when given."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO if level is None else level)
        _LOGGER_INITIALISED = True
        return

    if level is not None:
        root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger without touching an already chosen level."""

    configure_root_logger()
    return logging.getLogger(name)
