"""Core schema metamodel types.

Tables own an ordered list of columns. A column refers back to its table by
name only, so the graph holds no reference cycles and a column can be used as
a dictionary key for statement bindings.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sql_metamodel.exceptions import ConfigurationError


class ColumnType(Enum):
    """Semantic value types a column can hold."""

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    BINARY = "binary"
    # Primitive kinds: cannot hold null
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    BOOL = "bool"

    @property
    def is_primitive(self) -> bool:
        return self in _PRIMITIVES

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    def restore(self, value: Any) -> Any:
        """Convert a value read back from a cursor to this type's representation."""
        if value is None:
            return None
        python_type = self.python_type
        if isinstance(value, python_type) and not (
            python_type is int and isinstance(value, bool)
        ):
            return value
        if python_type is dt.date and isinstance(value, str):
            return dt.date.fromisoformat(value)
        if python_type is dt.datetime and isinstance(value, str):
            return dt.datetime.fromisoformat(value)
        if python_type is Decimal:
            return Decimal(str(value))
        return python_type(value)

    @classmethod
    def from_python_type(cls, python_type: type, primitive: bool = False) -> "ColumnType":
        """Pick the column type matching a property's Python type.

        ``primitive=True`` selects the non-nullable kind where one exists.
        """
        candidates = _PRIMITIVE_BY_PYTHON_TYPE if primitive else _OBJECT_BY_PYTHON_TYPE
        try:
            return candidates[python_type]
        except KeyError:
            if primitive and python_type in _OBJECT_BY_PYTHON_TYPE:
                return _OBJECT_BY_PYTHON_TYPE[python_type]
            raise ConfigurationError(
                f"No column type matches Python type {python_type!r}"
            ) from None


_PRIMITIVES = frozenset(
    {ColumnType.INT, ColumnType.LONG, ColumnType.DOUBLE, ColumnType.BOOL}
)

_PYTHON_TYPES: Dict[ColumnType, type] = {
    ColumnType.STRING: str,
    ColumnType.TEXT: str,
    ColumnType.INTEGER: int,
    ColumnType.BIGINT: int,
    ColumnType.FLOAT: float,
    ColumnType.DECIMAL: Decimal,
    ColumnType.BOOLEAN: bool,
    ColumnType.DATE: dt.date,
    ColumnType.DATETIME: dt.datetime,
    ColumnType.BINARY: bytes,
    ColumnType.INT: int,
    ColumnType.LONG: int,
    ColumnType.DOUBLE: float,
    ColumnType.BOOL: bool,
}

_OBJECT_BY_PYTHON_TYPE: Dict[type, ColumnType] = {
    str: ColumnType.STRING,
    int: ColumnType.INTEGER,
    float: ColumnType.FLOAT,
    Decimal: ColumnType.DECIMAL,
    bool: ColumnType.BOOLEAN,
    dt.date: ColumnType.DATE,
    dt.datetime: ColumnType.DATETIME,
    bytes: ColumnType.BINARY,
}

_PRIMITIVE_BY_PYTHON_TYPE: Dict[type, ColumnType] = {
    int: ColumnType.INT,
    float: ColumnType.DOUBLE,
    bool: ColumnType.BOOL,
}


@dataclass(frozen=True)
class Column:
    """A column of a table, identified by its table name and its own name."""

    name: str
    table_name: str
    column_type: ColumnType = ColumnType.STRING
    primary_key: bool = False

    @property
    def nullable(self) -> bool:
        return not (self.primary_key or self.column_type.is_primitive)

    @property
    def absolute_name(self) -> str:
        return f"{self.table_name}.{self.name}"

    def __str__(self) -> str:
        return self.absolute_name


@dataclass(eq=False)
class Table:
    """A table and its columns, in declaration order."""

    name: str
    schema: Optional[str] = None
    _columns: List[Column] = field(default_factory=list, init=False, repr=False)

    @property
    def absolute_name(self) -> str:
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    @property
    def columns(self) -> Tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def primary_keys(self) -> Tuple[Column, ...]:
        return tuple(c for c in self._columns if c.primary_key)

    def add_column(
        self,
        name: str,
        column_type: ColumnType = ColumnType.STRING,
        primary_key: bool = False,
    ) -> Column:
        """Create a column owned by this table and append it."""
        if any(c.name == name for c in self._columns):
            raise ConfigurationError(
                f"Column '{name}' already exists in table '{self.name}'"
            )
        column = Column(name, self.absolute_name, column_type, primary_key)
        self._columns.append(column)
        return column

    def get_column(self, name: str) -> Column:
        for column in self._columns:
            if column.name == name:
                return column
        available = [c.name for c in self._columns]
        raise ConfigurationError(
            f"Column '{name}' not found in table '{self.name}'. Available: {available}"
        )

    def __contains__(self, column: object) -> bool:
        return column in self._columns


def _single_owner(columns: Tuple[Column, ...], what: str, name: str) -> str:
    if not columns:
        raise ConfigurationError(f"{what} '{name}' needs at least one column")
    owners = {c.table_name for c in columns}
    if len(owners) > 1:
        raise ConfigurationError(
            f"Columns of {what.lower()} '{name}' belong to several tables: {sorted(owners)}"
        )
    return columns[0].table_name


class Index:
    """An index over one or more columns of a single table."""

    def __init__(self, columns: Iterable[Column] | Column, name: str):
        if isinstance(columns, Column):
            columns = (columns,)
        self.name = name
        self.columns: Tuple[Column, ...] = tuple(columns)
        self.table_name = _single_owner(self.columns, "Index", name)

    def __repr__(self) -> str:
        return f"Index(name={self.name!r}, columns={[c.name for c in self.columns]!r})"


class ForeignKey:
    """A foreign key pairing source columns with target columns by position."""

    def __init__(
        self,
        columns: Iterable[Column] | Column,
        name: str,
        target_columns: Iterable[Column] | Column,
    ):
        if isinstance(columns, Column):
            columns = (columns,)
        if isinstance(target_columns, Column):
            target_columns = (target_columns,)
        self.name = name
        self.columns: Tuple[Column, ...] = tuple(columns)
        self.target_columns: Tuple[Column, ...] = tuple(target_columns)
        if len(self.columns) != len(self.target_columns):
            raise ConfigurationError(
                f"Foreign key '{name}' has {len(self.columns)} source columns "
                f"but {len(self.target_columns)} target columns"
            )
        self.table_name = _single_owner(self.columns, "Foreign key", name)
        self.target_table_name = _single_owner(self.target_columns, "Foreign key target", name)

    def column_pairs(self) -> List[Tuple[Column, Column]]:
        return list(zip(self.columns, self.target_columns))

    def __repr__(self) -> str:
        return (
            f"ForeignKey(name={self.name!r}, "
            f"columns={[c.absolute_name for c in self.columns]!r}, "
            f"target_columns={[c.absolute_name for c in self.target_columns]!r})"
        )


__all__ = [
    "ColumnType",
    "Column",
    "Table",
    "Index",
    "ForeignKey",
]
