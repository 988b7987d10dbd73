"""Mini README: Application-wide logging helpers for the budget tracker.

Structure:
    * configure_root_logger - attach a single formatted handler to the root logger.
    * get_logger - module logger factory used by the ledger and its shells.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. The
    entry point calls ``configure_root_logger`` with the level from settings.
    Once a handler is installed, later calls only adjust the level, and
    ``get_logger`` leaves the level alone, so modules imported afterwards
    neither reset it nor stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the root handler once and apply ``level`` when one is given.

    The first install defaults to INFO; later calls without a level leave
    whatever level is already set.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO if level is None else level)
        _LOGGER_INITIALISED = True
    elif level is not None:
        root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, installing the handler if needed."""

    configure_root_logger()
    return logging.getLogger(name)
