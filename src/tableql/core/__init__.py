"""
tableql Core Module.

Contains the table/column model, the error taxonomy and the cursor codec.
"""

from tableql.core.cursor import CursorData, CursorEncoder, default_encoder
from tableql.core.errors import (
    InvalidCursorError,
    OrderingKeyCollisionError,
    TableQLError,
)
from tableql.core.types import (
    Column,
    ColumnMetadata,
    FieldType,
    Table,
    TableMetadata,
)

__all__ = [
    # Cursor
    "CursorData",
    "CursorEncoder",
    "default_encoder",
    # Errors
    "TableQLError",
    "OrderingKeyCollisionError",
    "InvalidCursorError",
    # Types
    "Column",
    "ColumnMetadata",
    "FieldType",
    "Table",
    "TableMetadata",
]
