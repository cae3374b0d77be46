"""
Table and column definitions for tableql.

`Table` and `Column` describe what any data-source adapter must provide.
`TableMetadata` and `ColumnMetadata` are the concrete models produced by the
bundled adapters and used throughout the tests.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, model_validator

from tableql.utils.naming import camel_case, pascal_case


class FieldType(str, Enum):
    """Supported native column types."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    UUID = "uuid"
    JSON = "json"
    BINARY = "binary"
    UNKNOWN = "unknown"


@runtime_checkable
class Column(Protocol):
    """A column as seen by the connection argument builders."""

    @property
    def name(self) -> str: ...

    @property
    def field_name(self) -> str: ...

    @property
    def markdown_field_name(self) -> str: ...

    @property
    def description(self) -> str | None: ...

    @property
    def field_type(self) -> FieldType | str: ...

    @property
    def nullable(self) -> bool: ...


@runtime_checkable
class Table(Protocol):
    """
    A table as seen by the connection argument builders.

    Tables are compared and cached by object identity, so two tables with the
    same name are still distinct tables.
    """

    @property
    def name(self) -> str: ...

    @property
    def type_name(self) -> str: ...

    @property
    def markdown_type_name(self) -> str: ...

    @property
    def columns(self) -> Sequence[Column]: ...

    @property
    def primary_key_columns(self) -> Sequence[Column]: ...


class ColumnMetadata(BaseModel):
    """Metadata for a table column."""

    name: str
    field_type: FieldType | str = FieldType.UNKNOWN
    nullable: bool = True
    description: str | None = None

    model_config = {"frozen": True}

    @property
    def field_name(self) -> str:
        """API-level name, camelCased from the storage name."""
        return camel_case(self.name)

    @property
    def markdown_field_name(self) -> str:
        return f"`{self.field_name}`"


class TableMetadata(BaseModel):
    """Metadata for a table and its ordered columns."""

    name: str
    columns: list[ColumnMetadata] = Field(default_factory=list)
    primary_keys: list[str] = Field(default_factory=list)
    description: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_primary_keys(self) -> "TableMetadata":
        known = {column.name for column in self.columns}
        missing = [key for key in self.primary_keys if key not in known]
        if missing:
            raise ValueError(
                f"Primary key columns not found on table '{self.name}': {', '.join(missing)}"
            )
        return self

    # Identity semantics: distinct instances are distinct tables
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @property
    def type_name(self) -> str:
        """API-level type name, PascalCased from the storage name."""
        return pascal_case(self.name)

    @property
    def markdown_type_name(self) -> str:
        return f"`{self.type_name}`"

    @property
    def primary_key_columns(self) -> list[ColumnMetadata]:
        """Primary key columns in key order."""
        by_name = {column.name: column for column in self.columns}
        return [by_name[key] for key in self.primary_keys]

    def get_column(self, name: str) -> ColumnMetadata | None:
        """Get a column by storage name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def list_columns(self) -> list[str]:
        """List column storage names in table order."""
        return [column.name for column in self.columns]
