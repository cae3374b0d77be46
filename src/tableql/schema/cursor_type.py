"""
The ``Cursor`` scalar used by the ``before`` and ``after`` arguments.
"""

from typing import Any

from graphql import GraphQLError, GraphQLScalarType, StringValueNode, print_ast

from tableql.core.cursor import CursorData, CursorEncoder, default_encoder
from tableql.core.errors import InvalidCursorError


def create_cursor_type(encoder: CursorEncoder = default_encoder) -> GraphQLScalarType:
    """
    Create a ``Cursor`` scalar bound to an encoder.

    Output values may be `CursorData` or already-encoded strings; input
    values are decoded into `CursorData`.
    """

    def serialize(value: Any) -> str:
        if isinstance(value, CursorData):
            return encoder.encode_data(value)
        if isinstance(value, str):
            return value
        raise GraphQLError(f"Cursor cannot represent value: {value!r}")

    def parse_value(value: Any) -> CursorData:
        if not isinstance(value, str):
            raise GraphQLError(f"Cursor cannot represent a non-string value: {value!r}")
        try:
            return encoder.decode(value)
        except InvalidCursorError as e:
            raise GraphQLError(e.message) from e

    def parse_literal(value_node: Any, _variables: Any = None) -> CursorData:
        if not isinstance(value_node, StringValueNode):
            raise GraphQLError(
                f"Cursor cannot represent a non-string value: {print_ast(value_node)}",
                value_node,
            )
        return parse_value(value_node.value)

    return GraphQLScalarType(
        name="Cursor",
        description="An opaque cursor used for pagination.",
        serialize=serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )


CursorType = create_cursor_type()
