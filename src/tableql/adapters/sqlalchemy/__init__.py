"""
SQLAlchemy table provider for tableql.
"""

from tableql.adapters.sqlalchemy.introspection import SQLAlchemyIntrospector

__all__ = ["SQLAlchemyIntrospector"]
