"""Tests for logging configuration."""

import logging

from diet_tracker.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("diet_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_accepts_level_names() -> None:
    configure_logging("debug")

    assert logging.getLogger("diet_tracker").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging()
