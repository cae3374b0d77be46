"""Tests for the table and column models."""

import pytest
from pydantic import ValidationError

from tableql.core.types import Column, ColumnMetadata, FieldType, Table, TableMetadata


class TestColumnMetadata:
    def test_field_names(self):
        column = ColumnMetadata(name="first_name")

        assert column.field_name == "firstName"
        assert column.markdown_field_name == "`firstName`"

    def test_non_ascii_names_are_kept(self):
        assert ColumnMetadata(name="naïve").field_name == "naïve"
        assert ColumnMetadata(name="名前").field_name != ColumnMetadata(name="住所").field_name

    def test_defaults(self):
        column = ColumnMetadata(name="notes")

        assert column.field_type == FieldType.UNKNOWN
        assert column.nullable is True
        assert column.description is None

    def test_frozen(self):
        column = ColumnMetadata(name="id")

        with pytest.raises(ValidationError):
            column.name = "other"

    def test_satisfies_protocol(self):
        assert isinstance(ColumnMetadata(name="id"), Column)


class TestTableMetadata:
    def test_type_names(self, users_table):
        assert users_table.type_name == "Users"
        assert users_table.markdown_type_name == "`Users`"

    def test_snake_case_type_name(self):
        assert TableMetadata(name="order_line_items").type_name == "OrderLineItems"

    def test_primary_key_columns_follow_key_order(self):
        table = TableMetadata(
            name="memberships",
            columns=[ColumnMetadata(name="a"), ColumnMetadata(name="b")],
            primary_keys=["b", "a"],
        )

        assert [column.name for column in table.primary_key_columns] == ["b", "a"]

    def test_no_primary_key(self, contacts_table):
        assert contacts_table.primary_key_columns == []

    def test_unknown_primary_key_rejected(self):
        with pytest.raises(ValidationError, match="missing_id"):
            TableMetadata(
                name="broken",
                columns=[ColumnMetadata(name="id")],
                primary_keys=["missing_id"],
            )

    def test_identity_equality(self, users_table):
        twin = users_table.model_copy()

        assert twin is not users_table
        assert twin != users_table
        assert users_table == users_table
        assert len({users_table, twin}) == 2

    def test_get_column(self, users_table):
        assert users_table.get_column("last_name") is users_table.columns[2]
        assert users_table.get_column("missing") is None

    def test_list_columns(self, users_table):
        assert users_table.list_columns() == ["id", "first_name", "last_name"]

    def test_satisfies_protocol(self, users_table):
        assert isinstance(users_table, Table)
