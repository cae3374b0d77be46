"""
tableql utilities.

Naming transforms and settings profiles.
"""

from tableql.utils.defaults import (
    DEFAULT_LENIENT,
    DEFAULT_STRICT,
    ConnectionSettings,
    OrderingKeyPolicy,
)
from tableql.utils.naming import camel_case, pascal_case, split_words, upper_snake_case

__all__ = [
    # Settings
    "ConnectionSettings",
    "OrderingKeyPolicy",
    "DEFAULT_STRICT",
    "DEFAULT_LENIENT",
    # Naming
    "camel_case",
    "pascal_case",
    "split_words",
    "upper_snake_case",
]
