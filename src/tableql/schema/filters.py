"""
Equality filter arguments for connection fields.
"""

from collections.abc import Iterable, Sequence

from graphql import GraphQLArgument, get_nullable_type

from tableql.core.types import Column
from tableql.schema.column_types import get_column_type


def build_column_filter_args(
    columns: Sequence[Column],
    ignored_columns: Iterable[Column] = (),
) -> dict[str, GraphQLArgument]:
    """
    Build one optional equality filter argument per column.

    Columns in `ignored_columns` are skipped. Membership is by identity, so a
    different column object with the same name is not excluded, and ignored
    columns that are not in `columns` have no effect.

    Returns:
        Arguments keyed by field name, in column order
    """
    ignored = {id(column) for column in ignored_columns}

    args: dict[str, GraphQLArgument] = {}
    for column in columns:
        if id(column) in ignored:
            continue
        args[column.field_name] = GraphQLArgument(
            get_nullable_type(get_column_type(column)),
            description=(
                "Filters the resulting set with an equality test on the "
                f"{column.markdown_field_name} field."
            ),
        )
    return args
