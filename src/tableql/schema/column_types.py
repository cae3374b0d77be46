"""
Column type resolution.

Maps native column types to graphql-core scalar types.
"""

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLString,
)

from tableql.core.types import Column, FieldType

# Temporal, binary and JSON values travel as strings
TYPE_MAPPING: dict[FieldType, GraphQLScalarType] = {
    FieldType.STRING: GraphQLString,
    FieldType.INTEGER: GraphQLInt,
    FieldType.FLOAT: GraphQLFloat,
    FieldType.BOOLEAN: GraphQLBoolean,
    FieldType.DATETIME: GraphQLString,
    FieldType.DATE: GraphQLString,
    FieldType.TIME: GraphQLString,
    FieldType.UUID: GraphQLID,
    FieldType.JSON: GraphQLString,
    FieldType.BINARY: GraphQLString,
    FieldType.UNKNOWN: GraphQLString,
}


def get_scalar_type(field_type: FieldType | str) -> GraphQLScalarType:
    """Get the scalar type for a native field type."""
    try:
        field_type = FieldType(field_type)
    except ValueError:
        return GraphQLString
    return TYPE_MAPPING[field_type]


def get_column_type(column: Column) -> GraphQLScalarType | GraphQLNonNull:
    """
    Get the schema type of a column.

    Non-nullable columns get a non-null type.
    """
    scalar = get_scalar_type(column.field_type)
    if column.nullable:
        return scalar
    return GraphQLNonNull(scalar)
