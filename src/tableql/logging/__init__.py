"""
tableql structured logging.

Provides JSON and text formatting for schema-build diagnostics.
"""

from tableql.logging.config import (
    LogFormat,
    LogLevel,
    TableQLLogger,
    configure_logging,
    get_logger,
)
from tableql.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "TableQLLogger",
    "LogLevel",
    "LogFormat",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
]
