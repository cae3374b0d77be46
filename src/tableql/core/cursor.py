"""
Opaque pagination cursors.

A cursor records the ordering it was produced under (the sort value of the
selected ordering enum member) and the values locating a row within that
ordering. Cursors are URL-safe base64 JSON with a short checksum.
"""

import base64
import binascii
import hashlib
import hmac
import json
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from tableql.core.errors import InvalidCursorError

# Tagged JSON encodings for values JSON has no type for, as
# (tag, type, encode, decode). datetime must come before date since it is a
# subclass.
_TAGGED_TYPES: list[tuple[str, type, Callable[[Any], str], Callable[[str], Any]]] = [
    ("_dt", datetime, datetime.isoformat, datetime.fromisoformat),
    ("_d", date, date.isoformat, date.fromisoformat),
    ("_t", time, time.isoformat, time.fromisoformat),
    ("_uuid", UUID, str, UUID),
    ("_dec", Decimal, str, Decimal),
]
_DECODERS = {tag: decode for tag, _, _, decode in _TAGGED_TYPES}


@dataclass
class CursorData:
    """
    Decoded cursor data.

    Contains the information needed to resume pagination.
    """

    sort_value: str  # Storage name of the ordering column
    values: dict[str, Any]  # Ordering and primary key values of the row
    checksum: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "o": self.sort_value,
            "v": self.values,
            "c": self.checksum,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CursorData":
        """Create from dictionary."""
        return cls(
            sort_value=data["o"],
            values=data["v"],
            checksum=data.get("c"),
        )


class CursorEncoder:
    """
    Encodes and decodes pagination cursors.

    Cursors are opaque strings; clients must not build or inspect them. The
    checksum makes edited cursors fail to decode instead of silently paging
    from the wrong position.
    """

    def __init__(self, secret: str | None = None) -> None:
        """
        Initialize the encoder.

        Args:
            secret: Optional secret mixed into the checksum
        """
        self.secret = secret or "tableql-cursor-default"

    def encode(self, sort_value: str, values: dict[str, Any]) -> str:
        """
        Encode a cursor.

        Args:
            sort_value: Sort value of the ordering in effect
            values: Values of the row the cursor points at. Besides JSON
                types, datetime, date, time, UUID and Decimal values
                round-trip.

        Returns:
            Encoded cursor string
        """
        return self.encode_data(CursorData(sort_value=sort_value, values=values))

    def encode_data(self, data: CursorData) -> str:
        """Encode already-built cursor data."""
        values = {k: self._serialize_value(v) for k, v in data.values.items()}
        payload = CursorData(
            sort_value=data.sort_value,
            values=values,
            checksum=self._compute_checksum(data.sort_value, values),
        )
        json_str = json.dumps(payload.to_dict(), separators=(",", ":"))
        return base64.urlsafe_b64encode(json_str.encode()).decode()

    def decode(self, cursor: str) -> CursorData:
        """
        Decode a cursor.

        Raises:
            InvalidCursorError: If the cursor is malformed or was tampered with
        """
        try:
            json_str = base64.urlsafe_b64decode(cursor.encode()).decode()
            raw = json.loads(json_str)
            if not isinstance(raw, dict):
                raise InvalidCursorError("cursor payload must be an object")
            data = CursorData.from_dict(raw)
        except (binascii.Error, UnicodeDecodeError, ValueError, KeyError, TypeError) as e:
            raise InvalidCursorError(str(e) or type(e).__name__) from e

        if not isinstance(data.sort_value, str):
            raise InvalidCursorError("sort value must be a string")
        if not isinstance(data.values, dict):
            raise InvalidCursorError("values must be an object")
        if not isinstance(data.checksum, str):
            raise InvalidCursorError("checksum mismatch")

        expected = self._compute_checksum(data.sort_value, data.values)
        if not hmac.compare_digest(data.checksum.encode(), expected.encode()):
            raise InvalidCursorError("checksum mismatch")

        try:
            data.values = {k: self._deserialize_value(v) for k, v in data.values.items()}
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidCursorError(f"invalid cursor value: {e}") from e
        return data

    def _compute_checksum(self, sort_value: str, values: dict[str, Any]) -> str:
        content = json.dumps([sort_value, values], sort_keys=True, default=str) + self.secret
        return hashlib.sha256(content.encode()).hexdigest()[:16]

    def _serialize_value(self, value: Any) -> Any:
        for tag, value_type, encode, _ in _TAGGED_TYPES:
            if isinstance(value, value_type):
                return {tag: encode(value)}
        return value

    def _deserialize_value(self, value: Any) -> Any:
        if isinstance(value, dict) and len(value) == 1:
            ((tag, encoded),) = value.items()
            if tag in _DECODERS:
                if not isinstance(encoded, str):
                    raise TypeError(f"{tag} value must be a string")
                return _DECODERS[tag](encoded)
        return value


# Default encoder instance
default_encoder = CursorEncoder()
