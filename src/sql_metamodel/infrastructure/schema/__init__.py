"""Schema metamodel: tables, columns, indexes, foreign keys and their DDL."""

from .core import Column, ColumnType, ForeignKey, Index, Table
from .ddl_generator import DDLGenerator, TypeRenderer

__all__ = [
    "ColumnType",
    "Column",
    "Table",
    "Index",
    "ForeignKey",
    "DDLGenerator",
    "TypeRenderer",
]
