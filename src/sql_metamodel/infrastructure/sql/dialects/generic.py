"""
Column type rendering for DDL generation.

Maps semantic column types to SQL type names. DDLGenerator only ever calls
``render_type``; dialect-specific names are supplied by overriding entries.
"""

from typing import Dict, Mapping, Optional

from ...schema.core import Column, ColumnType

DEFAULT_SQL_TYPES: Dict[ColumnType, str] = {
    ColumnType.STRING: "varchar(255)",
    ColumnType.TEXT: "text",
    ColumnType.INTEGER: "integer",
    ColumnType.BIGINT: "bigint",
    ColumnType.FLOAT: "double precision",
    ColumnType.DECIMAL: "decimal(18, 4)",
    ColumnType.BOOLEAN: "boolean",
    ColumnType.DATE: "date",
    ColumnType.DATETIME: "timestamp",
    ColumnType.BINARY: "blob",
    ColumnType.INT: "integer",
    ColumnType.LONG: "bigint",
    ColumnType.DOUBLE: "double precision",
    ColumnType.BOOL: "boolean",
}


class TypeMapping:
    """
    Column type renderer backed by a ColumnType -> SQL type name table.

    Example:
        >>> mapping = TypeMapping({ColumnType.STRING: "varchar(64)"})
        >>> mapping.render_type(Column("name", "users"))
        'varchar(64)'
    """

    name = "generic"

    def __init__(self, overrides: Optional[Mapping[ColumnType, str]] = None):
        self._sql_types: Dict[ColumnType, str] = dict(DEFAULT_SQL_TYPES)
        if overrides:
            self._sql_types.update(overrides)

    def render_type(self, column: Column) -> str:
        """Return the SQL type name for a column."""
        return self._sql_types[column.column_type]

    def __call__(self, column: Column) -> str:
        return self.render_type(column)


class SQLiteTypeMapping(TypeMapping):
    """SQLite type names, using its storage class affinities."""

    name = "sqlite"

    def __init__(self, overrides: Optional[Mapping[ColumnType, str]] = None):
        sqlite_types = {
            ColumnType.STRING: "varchar",
            ColumnType.FLOAT: "real",
            ColumnType.DOUBLE: "real",
            ColumnType.DECIMAL: "numeric",
            ColumnType.DATETIME: "datetime",
        }
        if overrides:
            sqlite_types.update(overrides)
        super().__init__(sqlite_types)
