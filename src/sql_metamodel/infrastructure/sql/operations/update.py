"""UPDATE statement binder."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from sqlalchemy.engine import Connection

from ...mapping.persistent_values import PersistentValues
from ...schema.core import Column
from ..core.parameters import Positions, normalize_indexes
from .base import WriteOperation


class UpdateOperation(WriteOperation):
    """
    Binds the ``set`` clause and the predicate of an UPDATE.

    ``update_indexes`` and ``where_indexes`` share the statement's position
    space, so one column may appear in both without colliding.
    """

    operation = "update"

    def __init__(
        self,
        sql: str,
        update_indexes: Mapping[Column, Positions],
        where_indexes: Optional[Mapping[Column, Positions]] = None,
        connection: Optional[Connection] = None,
    ):
        super().__init__(sql, connection)
        self.update_indexes = self._normalize(update_indexes)
        self.where_indexes = self._normalize(where_indexes or {})
        # Check the two maps together for positions claimed twice
        combined = {("set", c): p for c, p in self.update_indexes.items()}
        combined.update({("where", c): p for c, p in self.where_indexes.items()})
        normalize_indexes(combined)

    def _all_positions(self) -> Tuple[int, ...]:
        return tuple(
            p
            for indexes in (self.update_indexes, self.where_indexes)
            for positions in indexes.values()
            for p in positions
        )

    def set_value(self, column: Column, value: Any) -> None:
        """Bind a value written by the ``set`` clause."""
        self._set(self.update_indexes, column, value)

    def set_where_value(self, column: Column, value: Any) -> None:
        """Bind a value of the ``where`` clause."""
        self._set(self.where_indexes, column, value)

    def _apply(self, values: PersistentValues) -> None:
        for column, value in values.upsert_values.items():
            self.set_value(column, value)
        for column, value in values.where_values.items():
            self.set_where_value(column, value)
