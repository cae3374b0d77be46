"""
End-to-end tests: connection arguments inside a real graphql-core schema.
"""

import pytest
from graphql import (
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    graphql_sync,
    print_schema,
    validate_schema,
)

from tableql.core.cursor import CursorData
from tableql.schema.column_types import get_column_type
from tableql.schema.connection_args import create_connection_args
from tableql.schema.cursor_type import CursorType
from tableql.schema.ordering import OrderingEnumFactory

ROWS = [
    {"id": 1, "first_name": "Ada", "last_name": "Lovelace"},
    {"id": 2, "first_name": "Alan", "last_name": "Turing"},
    {"id": 3, "first_name": "Grace", "last_name": "Hopper"},
    {"id": 4, "first_name": "Ada", "last_name": "Byron"},
]


def _resolve_connection(table):
    """In-memory resolver honoring ordering, filters and pagination."""
    columns_by_field = {column.field_name: column.name for column in table.columns}

    def resolve(_root, _info, orderBy, descending, **args):
        rows = list(ROWS)
        for field_name, column_name in columns_by_field.items():
            if args.get(field_name) is not None:
                rows = [row for row in rows if row[column_name] == args[field_name]]

        def sort_key(row):
            return (row[orderBy], row["id"])

        rows.sort(key=sort_key, reverse=descending)

        after = args.get("after")
        if after is not None:
            position = (after.values[after.sort_value], after.values["id"])
            if descending:
                rows = [row for row in rows if sort_key(row) < position]
            else:
                rows = [row for row in rows if sort_key(row) > position]

        rows = rows[args.get("offset") or 0 :]
        if args.get("first") is not None:
            rows = rows[: args["first"]]

        return [
            {
                "cursor": CursorData(
                    sort_value=orderBy,
                    values={orderBy: row[orderBy], "id": row["id"]},
                ),
                "node": row,
            }
            for row in rows
        ]

    return resolve


@pytest.fixture
def schema(users_table):
    factory = OrderingEnumFactory()

    user_type = GraphQLObjectType(
        "User",
        lambda: {
            column.field_name: GraphQLField(
                get_column_type(column),
                resolve=lambda row, _info, name=column.name: row[name],
            )
            for column in users_table.columns
        },
    )
    edge_type = GraphQLObjectType(
        "UsersEdge",
        {
            "cursor": GraphQLField(GraphQLNonNull(CursorType)),
            "node": GraphQLField(GraphQLNonNull(user_type)),
        },
    )

    return GraphQLSchema(
        query=GraphQLObjectType(
            "Query",
            {
                "allUsers": GraphQLField(
                    GraphQLNonNull(GraphQLList(GraphQLNonNull(edge_type))),
                    args=create_connection_args(users_table, ordering_factory=factory),
                    resolve=_resolve_connection(users_table),
                ),
                # A second field over the same table shares the ordering enum
                "someUsers": GraphQLField(
                    GraphQLList(user_type),
                    args=create_connection_args(
                        users_table,
                        [users_table.columns[1]],
                        ordering_factory=factory,
                    ),
                    resolve=lambda *_args, **_kwargs: [],
                ),
            },
        )
    )


class TestSchemaBuild:
    def test_schema_is_valid(self, schema):
        assert validate_schema(schema) == []

    def test_printed_arguments(self, schema):
        printed = print_schema(schema)

        assert "orderBy: UsersOrdering = ID" in printed
        assert "descending: Boolean = false" in printed
        assert "before: Cursor" in printed
        assert "enum UsersOrdering" in printed

    def test_default_ordering(self, schema):
        result = graphql_sync(schema, "{ allUsers { node { id } } }")

        assert result.errors is None
        assert [edge["node"]["id"] for edge in result.data["allUsers"]] == [1, 2, 3, 4]

    def test_order_filter_and_limit(self, schema):
        result = graphql_sync(
            schema,
            '{ allUsers(orderBy: LAST_NAME, firstName: "Ada", first: 1) '
            "{ node { id lastName } } }",
        )

        assert result.errors is None
        assert result.data["allUsers"] == [{"node": {"id": 4, "lastName": "Byron"}}]

    def test_descending_with_offset(self, schema):
        result = graphql_sync(
            schema,
            "{ allUsers(descending: true, offset: 1) { node { id } } }",
        )

        assert result.errors is None
        assert [edge["node"]["id"] for edge in result.data["allUsers"]] == [3, 2, 1]

    def test_paging_with_after_cursor(self, schema):
        first_page = graphql_sync(
            schema,
            "{ allUsers(orderBy: FIRST_NAME, first: 2) { cursor node { id } } }",
        )
        assert first_page.errors is None
        assert [edge["node"]["id"] for edge in first_page.data["allUsers"]] == [1, 4]

        cursor = first_page.data["allUsers"][-1]["cursor"]
        second_page = graphql_sync(
            schema,
            "query Next($after: Cursor) { allUsers(orderBy: FIRST_NAME, after: $after) "
            "{ node { id } } }",
            variable_values={"after": cursor},
        )

        assert second_page.errors is None
        assert [edge["node"]["id"] for edge in second_page.data["allUsers"]] == [2, 3]

    def test_invalid_cursor_is_a_graphql_error(self, schema):
        result = graphql_sync(schema, '{ allUsers(after: "bogus") { node { id } } }')

        assert result.data is None
        assert result.errors

    def test_unknown_ordering_member_is_rejected(self, schema):
        result = graphql_sync(schema, "{ allUsers(orderBy: NICKNAME) { node { id } } }")

        assert result.errors

    def test_ignored_column_not_accepted_as_filter(self, schema):
        result = graphql_sync(schema, '{ someUsers(firstName: "Ada") { id } }')

        assert result.errors
        assert "firstName" in result.errors[0].message
