"""SELECT statement binder."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from sqlalchemy.engine import Connection

from ...mapping.persistent_values import PersistentValues
from ...schema.core import Column, Table
from ..core.parameters import Positions
from ..result.row_iterator import RowIterator
from .base import CRUDOperation


class SelectOperation(CRUDOperation):
    """
    Binds predicate values of a SELECT and iterates its rows.

    Example:
        >>> select = SelectOperation("select A from Toto where B = ?", {col_b: 1})
        >>> select.prepare(conn)
        >>> select.set_value(col_b, "x")
        >>> [row["A"] for row in select.execute()]
    """

    operation = "select"

    def __init__(
        self,
        sql: str,
        where_indexes: Mapping[Column, Positions],
        connection: Optional[Connection] = None,
        result_columns: Optional[Union[Table, Iterable[Column]]] = None,
    ):
        """
        Args:
            sql: statement with ``?`` markers
            where_indexes: positions of each predicate column, 1-based
            connection: connection to run on, or set later with prepare()
            result_columns: columns whose semantic types are restored on read
        """
        super().__init__(sql, connection)
        self.where_indexes = self._normalize(where_indexes)
        self.result_columns = result_columns

    def _all_positions(self) -> Tuple[int, ...]:
        return tuple(p for positions in self.where_indexes.values() for p in positions)

    def set_value(self, column: Column, value: Any) -> None:
        self._set(self.where_indexes, column, value)

    def _apply(self, values: PersistentValues) -> None:
        for column, value in values.where_values.items():
            self.set_value(column, value)

    def execute(self) -> RowIterator:
        return RowIterator(self._execute(), self.result_columns)
