"""
SQL parameter position utilities.

Statements use positional ``?`` markers numbered from 1. Binders receive a
``Column -> positions`` mapping; a column may sit at several positions of the
same statement (e.g. in both the ``set`` and the ``where`` clause).
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from sql_metamodel.exceptions import BindingError, ConfigurationError

from ...schema.core import Column, Table

PLACEHOLDER = "?"

Positions = Union[int, Iterable[int]]
ColumnIndexes = Dict[Column, Tuple[int, ...]]

# A quoted literal is matched first so markers inside it are left alone
_MARKER_PATTERN = re.compile(r"'(?:[^']|'')*'|(?<![:\w]):([A-Za-z_]\w*)")


def normalize_indexes(indexes: Mapping[Column, Positions]) -> ColumnIndexes:
    """
    Validate a column to position(s) mapping and freeze it.

    Examples:
        >>> col = Column("A", "Toto")
        >>> normalize_indexes({col: [1, 3]})[col]
        (1, 3)

    Raises:
        ConfigurationError: a position is not a positive integer, or is
            claimed by two columns
    """
    normalized: ColumnIndexes = {}
    owners: Dict[int, Column] = {}
    for column, positions in indexes.items():
        if isinstance(positions, int):
            positions = (positions,)
        elif not isinstance(positions, Iterable):
            raise ConfigurationError(
                f"Invalid positions {positions!r} for column {column}: "
                "expected an integer or a sequence of integers"
            )
        frozen = tuple(positions)
        if not frozen:
            raise ConfigurationError(f"Column {column} has no position")
        for position in frozen:
            if isinstance(position, bool) or not isinstance(position, int) or position < 1:
                raise ConfigurationError(
                    f"Invalid position {position!r} for column {column}: "
                    "positions are integers starting at 1"
                )
            other = owners.setdefault(position, column)
            if other != column:
                raise ConfigurationError(
                    f"Position {position} is claimed by both {other} and {column}"
                )
        normalized[column] = frozen
    return normalized


def build_positions(columns: Iterable[Column], start: int = 1) -> ColumnIndexes:
    """
    Assign consecutive positions to columns, starting at ``start``.

    Examples:
        >>> a, b = Column("A", "Toto"), Column("B", "Toto")
        >>> list(build_positions([a, b]).values())
        [(1,), (2,)]
    """
    return {column: (start + i,) for i, column in enumerate(columns)}


@dataclass(frozen=True)
class ParsedStatement:
    """Positional SQL and the positions of each column in it."""

    sql: str
    indexes: ColumnIndexes

    @property
    def parameter_count(self) -> int:
        return sum(len(p) for p in self.indexes.values())


def _columns_by_name(
    columns: Union[Table, Mapping[str, Column], Iterable[Column]],
) -> Dict[str, Column]:
    if isinstance(columns, Table):
        columns = columns.columns
    if isinstance(columns, Mapping):
        return dict(columns)
    by_name: Dict[str, Column] = {}
    for column in columns:
        if column.name in by_name:
            raise ConfigurationError(
                f"Column name '{column.name}' is ambiguous between "
                f"{by_name[column.name]} and {column}; pass a name mapping instead"
            )
        by_name[column.name] = column
    return by_name


def parse_template(
    template: str,
    columns: Union[Table, Mapping[str, Column], Iterable[Column]],
) -> ParsedStatement:
    """
    Turn a template with named markers into positional SQL.

    Each ``:name`` marker becomes ``?``; a name used several times gets all of
    its positions. ``::`` casts and markers inside quoted literals are kept.

    Examples:
        >>> table = Table("Toto")
        >>> a = table.add_column("A")
        >>> parsed = parse_template("update Toto set A = :A where A = :A", table)
        >>> parsed.sql
        'update Toto set A = ? where A = ?'
        >>> parsed.indexes[a]
        (1, 2)

    Raises:
        BindingError: a marker names no known column
    """
    by_name = _columns_by_name(columns)
    positions: Dict[Column, List[int]] = {}
    counter = 0

    def replace(match: "re.Match[str]") -> str:
        nonlocal counter
        name = match.group(1)
        if name is None:
            return match.group(0)
        if name not in by_name:
            raise BindingError(
                f"Marker ':{name}' matches no column. Available: {sorted(by_name)}",
                column=name,
            )
        counter += 1
        positions.setdefault(by_name[name], []).append(counter)
        return PLACEHOLDER

    sql = _MARKER_PATTERN.sub(replace, template)
    return ParsedStatement(sql, {c: tuple(p) for c, p in positions.items()})
