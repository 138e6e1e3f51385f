"""
Base class of the positional statement binders.

A binder wraps one SQL statement with ``?`` markers and the positions of each
column in it. Values are bound per invocation, then the statement is run
through a SQLAlchemy connection with ``exec_driver_sql`` so the driver's
positional parameter style is used as is.

A binder holds mutable bindings: share it between threads only with external
serialization, or build one per worker.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from sqlalchemy.engine import Connection, CursorResult

from sql_metamodel.exceptions import BindingError
from sql_metamodel.utils.logging import get_logger

from ...mapping.persistent_values import PersistentValues
from ...schema.core import Column
from ..core.parameters import ColumnIndexes, Positions, normalize_indexes

logger = get_logger(__name__)

_UNBOUND = object()


class CRUDOperation(ABC):
    """Common binding and execution logic of select/insert/update/delete."""

    operation = "crud"

    def __init__(self, sql: str, connection: Optional[Connection] = None):
        self.sql = sql
        self.connection = connection
        self._values: Dict[int, Any] = {}

    def prepare(self, connection: Connection) -> "CRUDOperation":
        """Attach the connection the statement runs on."""
        self.connection = connection
        return self

    @staticmethod
    def _normalize(indexes: Mapping[Column, Positions]) -> ColumnIndexes:
        return normalize_indexes(indexes)

    def _set(self, indexes: ColumnIndexes, column: Column, value: Any) -> None:
        positions = indexes.get(column)
        if positions is None:
            raise BindingError(
                f"Column {column} is not bound in statement: {self.sql}",
                column=str(column),
            )
        for position in positions:
            self._values[position] = value

    @abstractmethod
    def _all_positions(self) -> Tuple[int, ...]:
        """Every position the statement expects a value for."""
        pass

    @abstractmethod
    def set_value(self, column: Column, value: Any) -> None:
        pass

    @abstractmethod
    def _apply(self, values: PersistentValues) -> None:
        """Bind the bag(s) of ``values`` this statement kind reads."""
        pass

    def apply_values(self, values: PersistentValues) -> None:
        """Bind the values of one invocation.

        Bindings left by a previous invocation are dropped first, so a column
        missing from ``values`` stays unbound.
        """
        self.clear_values()
        self._apply(values)

    def clear_values(self) -> None:
        self._values.clear()

    def get_value(self, position: int) -> Any:
        """Value currently bound at a 1-based position."""
        value = self._values.get(position, _UNBOUND)
        if value is _UNBOUND:
            raise BindingError(f"Position {position} has no value in statement: {self.sql}")
        return value

    @property
    def parameters(self) -> Tuple[Any, ...]:
        """Bound values ordered by position.

        Raises:
            BindingError: some registered position has no value yet
        """
        positions = sorted(self._all_positions())
        missing = [p for p in positions if p not in self._values]
        if missing:
            raise BindingError(
                f"Positions {missing} have no value in statement: {self.sql}"
            )
        return tuple(self._values[p] for p in positions)

    def _execute(self) -> CursorResult:
        if self.connection is None:
            raise BindingError(
                f"No connection prepared for statement: {self.sql}"
            )
        parameters = self.parameters
        logger.debug(
            "statement.execute",
            operation=self.operation,
            sql=self.sql,
            parameter_count=len(parameters),
            parameters=parameters,
        )
        try:
            return self.connection.exec_driver_sql(self.sql, parameters)
        except Exception as exc:
            logger.error(
                "statement.execute_failed",
                operation=self.operation,
                sql=self.sql,
                error_type=type(exc).__name__,
                error=str(getattr(exc, "orig", None) or exc),
            )
            raise

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self.sql!r})"


class WriteOperation(CRUDOperation):
    """Statements returning an affected-row count."""

    def execute(self) -> int:
        result = self._execute()
        try:
            return result.rowcount
        finally:
            result.close()
