"""Structured JSON logging configuration.

This module configures logging for the editor and its command-line
tools, emitting JSON records suitable for log aggregation or a
human-readable format for local use.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds timestamp, level and logger name.

    Records at WARNING and above also carry their source location.
    """

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the log record.

        Args:
            log_record: Dictionary to populate with log fields.
            record: The original LogRecord.
            message_dict: Message dictionary from the record.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        if record.levelno >= logging.WARNING:
            log_record["location"] = f"{record.pathname}:{record.lineno}"
            log_record["function"] = record.funcName


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure root logging for the application.

    Args:
        log_level: Minimum log level to capture (DEBUG, INFO, WARNING,
            ERROR, CRITICAL). Unknown names fall back to INFO.
        json_output: If True, output JSON. If False, use a plain
            single-line format.

    Example:
        >>> configure_logging("DEBUG", json_output=False)
        >>> logging.info("Editor session started")
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)

    if json_output:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Name for the logger, typically __name__.

    Returns:
        Logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Hold added", extra={"hold_id": "abc123"})
    """
    return logging.getLogger(name)
