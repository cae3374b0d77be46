"""
SQLAlchemy table introspection.

Turns SQLAlchemy tables and declarative models into `TableMetadata`.
"""

from typing import Any

from sqlalchemy import Table as SATable
from sqlalchemy import inspect
from sqlalchemy.sql.sqltypes import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    Numeric,
    String,
    Text,
    Time,
    Uuid,
)

from tableql.core.types import ColumnMetadata, FieldType, TableMetadata
from tableql.logging import get_logger

logger = get_logger(__name__)


class SQLAlchemyIntrospector:
    """
    Introspects SQLAlchemy tables to extract table metadata.

    Each source table is introspected once. Later calls return the same
    `TableMetadata` instance, which keeps ordering enums (cached by table
    identity) stable across repeated schema builds.
    """

    def __init__(self, sources: list[Any]) -> None:
        """
        Initialize with tables or declarative model classes.

        Args:
            sources: `sqlalchemy.Table` objects or mapped model classes
        """
        self.sources = sources
        self._tables: dict[SATable, TableMetadata] = {}

    def introspect(self) -> list[TableMetadata]:
        """
        Introspect all registered sources, in registration order.
        """
        return [self.introspect_table(source) for source in self.sources]

    def introspect_table(self, source: Any) -> TableMetadata:
        """Introspect a single table or model, reusing earlier results."""
        sa_table = self._get_table(source)
        cached = self._tables.get(sa_table)
        if cached is not None:
            return cached

        table_meta = self._introspect(sa_table)
        self._tables[sa_table] = table_meta
        logger.debug(
            "Introspected table",
            table=table_meta.name,
            columns=len(table_meta.columns),
        )
        return table_meta

    def _get_table(self, source: Any) -> SATable:
        if isinstance(source, SATable):
            return source
        return inspect(source).local_table

    def _introspect(self, sa_table: SATable) -> TableMetadata:
        columns = [self._introspect_column(column) for column in sa_table.columns]
        primary_keys = [column.name for column in sa_table.primary_key.columns]

        return TableMetadata(
            name=sa_table.name,
            columns=columns,
            primary_keys=primary_keys,
            description=sa_table.comment,
        )

    def _introspect_column(self, column: Any) -> ColumnMetadata:
        return ColumnMetadata(
            name=column.name,
            field_type=self._get_field_type(column.type),
            nullable=bool(column.nullable),
            description=column.comment or column.doc,
        )

    def _get_field_type(self, sa_type: Any) -> FieldType:
        """Map SQLAlchemy type to a native FieldType."""
        # Order matters: DateTime before Date, Float before Numeric
        type_mapping = [
            (Boolean, FieldType.BOOLEAN),
            (Integer, FieldType.INTEGER),
            (Float, FieldType.FLOAT),
            (Numeric, FieldType.FLOAT),
            (DateTime, FieldType.DATETIME),
            (Date, FieldType.DATE),
            (Time, FieldType.TIME),
            (Uuid, FieldType.UUID),
            (JSON, FieldType.JSON),
            (LargeBinary, FieldType.BINARY),
            (Text, FieldType.STRING),
            (String, FieldType.STRING),
        ]

        for sa_class, field_type in type_mapping:
            if isinstance(sa_type, sa_class):
                return field_type

        type_name = type(sa_type).__name__.lower()
        if "uuid" in type_name:
            return FieldType.UUID
        if "json" in type_name:
            return FieldType.JSON

        return FieldType.UNKNOWN
