"""
tableql - connection arguments for table-backed GraphQL collections.

tableql builds the arguments of paginated connection fields over database
tables: an ordering enum per table that doubles as the cursor's sort domain,
cursor and offset pagination, and optional equality filters per column.
"""

__version__ = "0.1.0"

from tableql.core.errors import (
    InvalidCursorError,
    OrderingKeyCollisionError,
    TableQLError,
)
from tableql.core.types import Column, ColumnMetadata, FieldType, Table, TableMetadata
from tableql.schema import (
    CursorType,
    OrderingEnumFactory,
    build_column_filter_args,
    create_connection_args,
    create_connection_args_from_settings,
    create_table_ordering_enum,
    default_order_by_value,
)
from tableql.utils.defaults import ConnectionSettings, OrderingKeyPolicy

__all__ = [
    # Version
    "__version__",
    # Types
    "Column",
    "ColumnMetadata",
    "FieldType",
    "Table",
    "TableMetadata",
    # Schema
    "CursorType",
    "OrderingEnumFactory",
    "build_column_filter_args",
    "create_connection_args",
    "create_connection_args_from_settings",
    "create_table_ordering_enum",
    "default_order_by_value",
    # Settings
    "ConnectionSettings",
    "OrderingKeyPolicy",
    # Errors
    "TableQLError",
    "OrderingKeyCollisionError",
    "InvalidCursorError",
]
