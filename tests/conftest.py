"""
Shared test fixtures.
"""

import pytest

from tableql.core.types import ColumnMetadata, FieldType, TableMetadata
from tableql.schema.ordering import OrderingEnumFactory

# === Fixtures ===


@pytest.fixture
def users_table():
    """Users table keyed by `id`."""
    return TableMetadata(
        name="users",
        columns=[
            ColumnMetadata(
                name="id",
                field_type=FieldType.INTEGER,
                nullable=False,
                description="Unique user id",
            ),
            ColumnMetadata(
                name="first_name",
                field_type=FieldType.STRING,
                nullable=False,
                description="Given name",
            ),
            ColumnMetadata(
                name="last_name",
                field_type=FieldType.STRING,
                nullable=True,
            ),
        ],
        primary_keys=["id"],
    )


@pytest.fixture
def contacts_table():
    """Table without a primary key."""
    return TableMetadata(
        name="contacts",
        columns=[
            ColumnMetadata(name="email", field_type=FieldType.STRING, nullable=False),
            ColumnMetadata(name="created_at", field_type=FieldType.DATETIME, nullable=False),
        ],
    )


@pytest.fixture
def empty_table():
    """Table without columns."""
    return TableMetadata(name="nothing")


@pytest.fixture
def factory():
    """Fresh ordering enum factory, isolated from the process-wide one."""
    return OrderingEnumFactory()
