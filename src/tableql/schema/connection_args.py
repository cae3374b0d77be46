"""
Connection argument builder.

Assembles the arguments of a paginated connection field over a table:
ordering, cursor and offset pagination, and per-column equality filters.
"""

from collections.abc import Iterable

from graphql import GraphQLArgument, GraphQLBoolean, GraphQLInt, Undefined

from tableql.core.types import Column, Table
from tableql.logging import get_logger
from tableql.schema.cursor_type import CursorType
from tableql.schema.filters import build_column_filter_args
from tableql.schema.ordering import OrderingEnumFactory, default_ordering_factory
from tableql.utils.defaults import ConnectionSettings

logger = get_logger(__name__)


def default_order_by_value(table: Table) -> str | None:
    """Storage name of the first primary key column, if the table has one."""
    primary_key_columns = table.primary_key_columns
    if primary_key_columns:
        return primary_key_columns[0].name
    return None


def create_connection_args(
    table: Table,
    ignored_columns: Iterable[Column] = (),
    *,
    ordering_factory: OrderingEnumFactory | None = None,
) -> dict[str, GraphQLArgument]:
    """
    Build the arguments of a connection field for a table.

    The seven pagination arguments always come first, in a fixed order,
    followed by one equality filter per column not in `ignored_columns`.
    Ignored columns still appear in the ordering enum. The map is built fresh
    on every call; only the ``orderBy`` enum is cached.

    Mutual exclusion of ``first``/``last`` and ``before``/``after`` is left
    to the resolver.

    Args:
        table: Table to build arguments for
        ignored_columns: Columns that get no equality filter
        ordering_factory: Factory for the ``orderBy`` enum (defaults to the
            process-wide factory)

    Returns:
        Ordered mapping of argument name to argument
    """
    factory = ordering_factory if ordering_factory is not None else default_ordering_factory
    order_by_default = default_order_by_value(table)

    args: dict[str, GraphQLArgument] = {
        # The orderBy column is also the column cursors are built from
        "orderBy": GraphQLArgument(
            factory.get(table),
            default_value=order_by_default if order_by_default is not None else Undefined,
            description=(
                "The order the resulting items should be returned in. This argument "
                "is also important as it is used in creating pagination cursors. This "
                "value’s default is the primary key for the object."
            ),
        ),
        "first": GraphQLArgument(
            GraphQLInt,
            description="The top `n` items in the set to be returned. Can’t be used with `last`.",
        ),
        "last": GraphQLArgument(
            GraphQLInt,
            description=(
                "The bottom `n` items in the set to be returned. Can’t be used with `first`."
            ),
        ),
        "before": GraphQLArgument(
            CursorType,
            description=(
                "Constrains the set to nodes *before* this cursor in the specified ordering."
            ),
        ),
        "after": GraphQLArgument(
            CursorType,
            description=(
                "Constrains the set to nodes *after* this cursor in the specified ordering."
            ),
        ),
        "offset": GraphQLArgument(
            GraphQLInt,
            description="An integer offset representing how many items to skip in the set.",
        ),
        "descending": GraphQLArgument(
            GraphQLBoolean,
            default_value=False,
            description=(
                "If `true` the nodes will be in descending order, if `false` the "
                "items will be in ascending order. `false` by default."
            ),
        ),
    }

    for name, filter_arg in build_column_filter_args(table.columns, ignored_columns).items():
        if name in args:
            logger.warning(
                f"Column field '{name}' shadows a pagination argument, no filter added",
                table=table.name,
            )
            continue
        args[name] = filter_arg
    return args


def create_connection_args_from_settings(
    table: Table,
    settings: ConnectionSettings,
    ordering_factory: OrderingEnumFactory | None = None,
) -> dict[str, GraphQLArgument]:
    """
    Build connection arguments, ignoring the columns named in `settings`.

    Names that match no column of the table are skipped.
    """
    ignored_names = set(settings.ignored_column_names)
    ignored_columns = [column for column in table.columns if column.name in ignored_names]
    return create_connection_args(
        table,
        ignored_columns,
        ordering_factory=ordering_factory,
    )
