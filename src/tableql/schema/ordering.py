"""
Ordering enum factory.

Every table gets exactly one ordering enum, listing all of its columns. The
enum is the type of the ``orderBy`` argument and the selected member's value
is the sort value recorded in pagination cursors.
"""

import threading

from graphql import GraphQLEnumType, GraphQLEnumValue

from tableql.core.errors import OrderingKeyCollisionError
from tableql.core.types import Column, Table
from tableql.logging import get_logger
from tableql.utils.defaults import ConnectionSettings, OrderingKeyPolicy
from tableql.utils.naming import upper_snake_case

logger = get_logger(__name__)


class OrderingEnumFactory:
    """
    Memoized factory for table ordering enums.

    Enums are cached by table identity, never by name: asking twice for the
    same table returns the same enum instance, while two tables that happen
    to share a name get separate enums. The cache keeps a reference to each
    table it has built for.

    Lookups and builds are serialized by a lock so concurrent schema builds
    never produce two enums for one table.
    """

    def __init__(
        self,
        suffix: str = "Ordering",
        key_policy: OrderingKeyPolicy = OrderingKeyPolicy.REJECT,
    ) -> None:
        """
        Initialize the factory.

        Args:
            suffix: Appended to the table's type name to name the enum
            key_policy: How to handle columns that map to the same enum key
        """
        self.suffix = suffix
        self.key_policy = key_policy
        self._cache: dict[int, tuple[Table, GraphQLEnumType]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> "OrderingEnumFactory":
        """Create a factory configured from connection settings."""
        return cls(suffix=settings.ordering_suffix, key_policy=settings.key_policy)

    def get(self, table: Table) -> GraphQLEnumType:
        """
        Get or create the ordering enum for a table.

        Raises:
            OrderingKeyCollisionError: If two columns map to the same key and
                the key policy is REJECT
        """
        with self._lock:
            cached = self._cache.get(id(table))
            if cached is not None:
                return cached[1]

            ordering_enum = self._create_enum(table)
            self._cache[id(table)] = (table, ordering_enum)
            return ordering_enum

    def clear(self) -> None:
        """Forget every cached enum."""
        with self._lock:
            self._cache.clear()

    def __contains__(self, table: object) -> bool:
        cached = self._cache.get(id(table))
        return cached is not None and cached[0] is table

    def __len__(self) -> int:
        """Number of cached enums."""
        return len(self._cache)

    def _create_enum(self, table: Table) -> GraphQLEnumType:
        values: dict[str, GraphQLEnumValue] = {}
        owners: dict[str, Column] = {}

        for column in table.columns:
            key = upper_snake_case(column.field_name)
            if key in owners:
                self._on_collision(table, key, owners[key], column)
            owners[key] = column
            values[key] = GraphQLEnumValue(
                value=column.name,
                description=column.description,
            )

        logger.debug(
            "Built ordering enum",
            table=table.name,
            members=len(values),
        )

        return GraphQLEnumType(
            name=f"{table.type_name}{self.suffix}",
            values=values,
            description=f"Properties with which {table.markdown_type_name} can be ordered.",
        )

    def _on_collision(self, table: Table, key: str, previous: Column, column: Column) -> None:
        if self.key_policy == OrderingKeyPolicy.REJECT:
            raise OrderingKeyCollisionError(table.name, key, [previous.name, column.name])
        logger.warning(
            f"Ordering key '{key}' of column '{previous.name}' replaced by column '{column.name}'",
            table=table.name,
        )


# Process-wide factory shared by schema builds that do not bring their own
default_ordering_factory = OrderingEnumFactory()


def create_table_ordering_enum(table: Table) -> GraphQLEnumType:
    """Get the ordering enum for a table from the default factory."""
    return default_ordering_factory.get(table)
