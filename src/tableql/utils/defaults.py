"""
Default settings profiles for tableql.
"""

from dataclasses import dataclass
from enum import Enum


class OrderingKeyPolicy(str, Enum):
    """What to do when two columns map to the same ordering enum key."""

    REJECT = "reject"  # Raise OrderingKeyCollisionError
    LAST_WINS = "last_wins"  # Keep the later column, log a warning


@dataclass(frozen=True)
class ConnectionSettings:
    """
    Settings for building connection arguments.

    Settings are read once per schema build; changing them after enums have
    been cached only affects tables built afterwards.
    """

    # Ordering enums are named f"{table.type_name}{ordering_suffix}"
    ordering_suffix: str = "Ordering"
    key_policy: OrderingKeyPolicy = OrderingKeyPolicy.REJECT

    # Storage names of columns that never get an equality filter
    ignored_column_names: tuple[str, ...] = ()

    def with_ignored_columns(self, *names: str) -> "ConnectionSettings":
        """Return a copy that also ignores the given columns for filtering."""
        return ConnectionSettings(
            ordering_suffix=self.ordering_suffix,
            key_policy=self.key_policy,
            ignored_column_names=self.ignored_column_names + names,
        )


# Built-in profiles

DEFAULT_STRICT = ConnectionSettings(key_policy=OrderingKeyPolicy.REJECT)

DEFAULT_LENIENT = ConnectionSettings(key_policy=OrderingKeyPolicy.LAST_WINS)
