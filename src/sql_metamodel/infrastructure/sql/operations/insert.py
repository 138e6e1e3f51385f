"""
INSERT statement binder.

The INSERT statement text itself is produced by DMLGenerator.build_insert or
supplied by the caller; this class only binds and runs it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from sqlalchemy.engine import Connection

from ...mapping.persistent_values import PersistentValues
from ...schema.core import Column
from ..core.parameters import Positions
from .base import WriteOperation


class InsertOperation(WriteOperation):
    """Binds the written values of an INSERT and returns the inserted row count."""

    operation = "insert"

    def __init__(
        self,
        sql: str,
        insert_indexes: Mapping[Column, Positions],
        connection: Optional[Connection] = None,
    ):
        super().__init__(sql, connection)
        self.insert_indexes = self._normalize(insert_indexes)

    def _all_positions(self) -> Tuple[int, ...]:
        return tuple(p for positions in self.insert_indexes.values() for p in positions)

    def set_value(self, column: Column, value: Any) -> None:
        self._set(self.insert_indexes, column, value)

    def _apply(self, values: PersistentValues) -> None:
        for column, value in values.upsert_values.items():
            self.set_value(column, value)
