"""Tests for logging configuration."""

import logging

from worship_tracker.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("worship_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level() -> None:
    logger = logging.getLogger("worship_tracker")

    configure_logging("debug")

    assert logger.level == logging.DEBUG
    configure_logging()
    assert logger.level == logging.INFO


def test_configure_logging_format_has_no_timestamp() -> None:
    logger = logging.getLogger("worship_tracker")
    logger.handlers.clear()

    configure_logging()

    formatter = logger.handlers[0].formatter
    assert formatter is not None
    assert formatter._fmt == "%(levelname)s: %(name)s: %(message)s"
