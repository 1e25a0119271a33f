"""Mini README: Tests for the logging setup helpers."""

from __future__ import annotations

import logging

from tabledger.logging_utils import HANDLER_NAME, configure_root_logger, get_logger


def test_console_handler_is_installed_once() -> None:
    configure_root_logger()
    configure_root_logger(logging.WARNING)
    get_logger("tabledger.test")

    root_logger = logging.getLogger()
    named = [handler for handler in root_logger.handlers if handler.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert root_logger.level == logging.WARNING
    root_logger.setLevel(logging.INFO)
