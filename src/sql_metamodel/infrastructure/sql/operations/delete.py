"""DELETE statement binder."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from sqlalchemy.engine import Connection

from ...mapping.persistent_values import PersistentValues
from ...schema.core import Column
from ..core.parameters import Positions
from .base import WriteOperation


class DeleteOperation(WriteOperation):
    """Binds the predicate of a DELETE and returns the deleted row count."""

    operation = "delete"

    def __init__(
        self,
        sql: str,
        where_indexes: Mapping[Column, Positions],
        connection: Optional[Connection] = None,
    ):
        super().__init__(sql, connection)
        self.where_indexes = self._normalize(where_indexes)

    def _all_positions(self) -> Tuple[int, ...]:
        return tuple(p for positions in self.where_indexes.values() for p in positions)

    def set_value(self, column: Column, value: Any) -> None:
        self._set(self.where_indexes, column, value)

    def _apply(self, values: PersistentValues) -> None:
        for column, value in values.where_values.items():
            self.set_value(column, value)
