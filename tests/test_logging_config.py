"""Tests for logging configuration module."""

import json
import logging
from io import StringIO

import pytest

from climbset.logging_config import (
    CustomJsonFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _capture(logger_name: str) -> tuple[logging.Logger, StringIO]:
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(message)s"))
    logger.addHandler(handler)
    return logger, stream


class TestConfigureLogging:
    """Tests for configure_logging function."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING"])
    def test_configure_logging_sets_log_level(self, level) -> None:
        """Log level should be set on root logger."""
        configure_logging(level)
        assert logging.getLogger().level == getattr(logging, level)

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names default to INFO."""
        configure_logging("CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_clears_existing_handlers(self) -> None:
        """Existing handlers should be replaced by exactly one."""
        root_logger = logging.getLogger()
        root_logger.addHandler(logging.StreamHandler())

        configure_logging("INFO")

        assert len(root_logger.handlers) == 1

    def test_configure_logging_json_output_true(self) -> None:
        """JSON output should use CustomJsonFormatter."""
        configure_logging("INFO", json_output=True)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, CustomJsonFormatter)

    def test_configure_logging_json_output_false(self) -> None:
        """Non-JSON output should use standard Formatter."""
        configure_logging("INFO", json_output=False)
        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, CustomJsonFormatter)


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter class."""

    def test_json_formatter_standard_fields(self) -> None:
        """Output is JSON with message, level, logger and timestamp."""
        logger, stream = _capture("climbset.test_fields")
        logger.info("Hold added")

        data = json.loads(stream.getvalue())
        assert data["message"] == "Hold added"
        assert data["level"] == "INFO"
        assert data["logger"] == "climbset.test_fields"
        assert "timestamp" in data

    def test_json_formatter_includes_extra(self) -> None:
        """Extra context is carried into the record."""
        logger, stream = _capture("climbset.test_extra")
        logger.info("Hold added", extra={"hold_id": "abc123"})

        data = json.loads(stream.getvalue())
        assert data["hold_id"] == "abc123"

    def test_json_formatter_location_only_for_warnings(self) -> None:
        """Location is included for WARNING and above only."""
        logger, stream = _capture("climbset.test_location")
        logger.info("Quiet")
        logger.warning("Loud")

        info, warning = (json.loads(line) for line in stream.getvalue().splitlines())
        assert "location" not in info
        assert "location" in warning
        assert "function" in warning


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self) -> None:
        """Logger should have the specified name."""
        logger = get_logger("climbset.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "climbset.module"

    def test_get_logger_same_name_returns_same_logger(self) -> None:
        """Same name should return the same logger instance."""
        assert get_logger("same_name") is get_logger("same_name")
