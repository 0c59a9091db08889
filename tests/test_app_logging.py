"""Tests for logging configuration."""

import logging

from artvault.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("artvault")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_module_loggers_inherit_app_handler() -> None:
    configure_logging()

    child = logging.getLogger("artvault.services.artwork")

    assert child.getEffectiveLevel() == logging.INFO


def test_configure_logging_accepts_level_name() -> None:
    configure_logging("debug")

    assert logging.getLogger("artvault").level == logging.DEBUG
    assert logging.getLogger("pymongo").level == logging.WARNING
    configure_logging()
