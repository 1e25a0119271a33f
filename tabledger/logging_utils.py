"""Mini README: Logging setup for Tab Ledger.

Structure:
    * configure_root_logger - attach the tracker's console handler once and
      apply the level chosen in ``TrackerSettings.log_level``.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

Ledger and tab mutations log at INFO, rejected input at WARNING, and
lookups at DEBUG. The handler is recognised by name, so uvicorn's reloader
re-importing the package does not stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

HANDLER_NAME = "tabledger-console"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_root_logger(level: Optional[int] = None) -> None:
    """Install the console handler if missing; set ``level`` when given."""

    root_logger = logging.getLogger()
    if not any(handler.get_name() == HANDLER_NAME for handler in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(handler)
        if level is None:
            level = logging.INFO
    if level is not None:
        root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger, installing the console handler on first use."""

    configure_root_logger()
    return logging.getLogger(name)
