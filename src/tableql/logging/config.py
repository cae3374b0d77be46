"""
Logging configuration for tableql.

Provides easy setup of structured logging for different environments.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, TextIO

from tableql.logging.formatters import JSONFormatter, TextFormatter


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    TEXT = "text"


class TableQLLogger:
    """
    Logger wrapper that passes keyword arguments through as record fields.

    Example:
        logger = TableQLLogger("tableql.schema")
        logger.debug("Built ordering enum", table="users", members=3)
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._logger.debug(msg, *args, extra=fields)

    def warning(self, msg: str, *args: Any, **fields: Any) -> None:
        self._logger.warning(msg, *args, extra=fields)


def get_logger(name: str) -> TableQLLogger:
    """Get a tableql logger by name, e.g. ``get_logger(__name__)``."""
    return TableQLLogger(name)


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    format: LogFormat | str = LogFormat.JSON,
    output: TextIO | None = None,
    use_colors: bool = True,
) -> None:
    """
    Configure tableql logging.

    Should be called once at application startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (json for production, text for development)
        output: Output stream (defaults to stderr)
        use_colors: Whether to use colors in text format (ignored for JSON)

    Example:
        configure_logging(level="DEBUG", format="text")
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())

    if isinstance(format, str):
        format = LogFormat(format.lower())

    if output is None:
        output = sys.stderr

    root_logger = logging.getLogger("tableql")
    root_logger.setLevel(getattr(logging, level.value))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(output)
    handler.setLevel(getattr(logging, level.value))

    if format == LogFormat.JSON:
        formatter: logging.Formatter = JSONFormatter(include_extra=True)
    else:
        formatter = TextFormatter(use_colors=use_colors)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.propagate = False
