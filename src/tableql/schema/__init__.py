"""
tableql Schema Module.

Builds graphql-core types and arguments for table connection fields.
"""

from tableql.schema.column_types import get_column_type, get_scalar_type
from tableql.schema.connection_args import (
    create_connection_args,
    create_connection_args_from_settings,
    default_order_by_value,
)
from tableql.schema.cursor_type import CursorType, create_cursor_type
from tableql.schema.filters import build_column_filter_args
from tableql.schema.ordering import (
    OrderingEnumFactory,
    create_table_ordering_enum,
    default_ordering_factory,
)

__all__ = [
    # Connection arguments
    "create_connection_args",
    "create_connection_args_from_settings",
    "default_order_by_value",
    "build_column_filter_args",
    # Ordering
    "OrderingEnumFactory",
    "create_table_ordering_enum",
    "default_ordering_factory",
    # Types
    "CursorType",
    "create_cursor_type",
    "get_column_type",
    "get_scalar_type",
]
