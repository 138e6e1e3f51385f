"""Column type renderers for DDL generation."""

from .generic import DEFAULT_SQL_TYPES, SQLiteTypeMapping, TypeMapping

__all__ = ["DEFAULT_SQL_TYPES", "TypeMapping", "SQLiteTypeMapping"]
