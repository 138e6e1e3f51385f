"""
SQL module: type rendering, positional statement binders and result adapters.

Statements use ``?`` markers; binders map each column to its 1-based
position(s) and run through SQLAlchemy connections.
"""

from .core.parameters import ParsedStatement, build_positions, parse_template
from .dialects.generic import SQLiteTypeMapping, TypeMapping
from .dml_generator import DMLGenerator
from .engine import create_engine
from .operations import (
    CRUDOperation,
    DeleteOperation,
    InsertOperation,
    SelectOperation,
    UpdateOperation,
)
from .result import Row, RowIterator

__all__ = [
    "ParsedStatement",
    "build_positions",
    "parse_template",
    "TypeMapping",
    "SQLiteTypeMapping",
    "DMLGenerator",
    "create_engine",
    "CRUDOperation",
    "SelectOperation",
    "InsertOperation",
    "UpdateOperation",
    "DeleteOperation",
    "Row",
    "RowIterator",
]
