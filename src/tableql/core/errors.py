"""
Error taxonomy for tableql.

All tableql errors inherit from TableQLError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional structured details
"""

from typing import Any


class TableQLError(Exception):
    """
    Base class for all tableql errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        details: Additional error context
    """

    code: str = "TABLEQL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class OrderingKeyCollisionError(TableQLError):
    """Two columns of one table normalize to the same ordering enum key."""

    code = "ORDERING_KEY_COLLISION"

    def __init__(
        self,
        table: str,
        key: str,
        columns: list[str],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Columns {', '.join(repr(c) for c in columns)} of table '{table}' "
            f"all map to ordering key '{key}'",
            details={"table": table, "key": key, "columns": columns},
            **kwargs,
        )


class InvalidCursorError(TableQLError):
    """A pagination cursor could not be decoded or failed verification."""

    code = "INVALID_CURSOR"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid cursor: {reason}",
            details={"reason": reason},
            **kwargs,
        )
