"""
Lazy, forward-only iteration over a statement result.

RowIterator fetches one row at a time from the underlying cursor and adapts
it to a Row. It is single pass: once the cursor is exhausted (or closed) it
keeps raising StopIteration without touching the cursor again.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Protocol, Sequence, Union

from ...schema.core import Column, Table
from .row import Row

_NOT_FETCHED = object()


class Cursor(Protocol):
    """Minimal cursor shape consumed by RowIterator (SQLAlchemy CursorResult fits)."""

    def fetchone(self) -> Optional[Sequence[Any]]: ...

    def keys(self) -> Iterable[str]: ...

    def close(self) -> None: ...


class RowIterator:
    """
    Adapts a forward-only cursor into an iterator of Row.

    Args:
        result: cursor-like object with fetchone(), keys() and close()
        columns: Table or columns whose semantic types are restored on
            values of matching labels; other values are returned as read
    """

    def __init__(
        self,
        result: Cursor,
        columns: Optional[Union[Table, Iterable[Column]]] = None,
    ):
        self._result = result
        self._keys = tuple(result.keys())
        if isinstance(columns, Table):
            columns = columns.columns
        self._columns: Dict[str, Column] = {c.name: c for c in columns or ()}
        self._pending: Any = _NOT_FETCHED
        self._exhausted = False

    def keys(self):
        return self._keys

    def _fetch(self) -> Any:
        if self._pending is not _NOT_FETCHED:
            raw, self._pending = self._pending, _NOT_FETCHED
            return raw
        if self._exhausted:
            return None
        raw = self._result.fetchone()
        if raw is None:
            self._release()
        return raw

    def _release(self) -> None:
        self._exhausted = True
        self._result.close()

    def _adapt(self, raw: Sequence[Any]) -> Row:
        values = list(raw)
        for i, key in enumerate(self._keys):
            column = self._columns.get(key)
            if column is not None:
                values[i] = column.column_type.restore(values[i])
        return Row(self._keys, values)

    @property
    def exhausted(self) -> bool:
        """True when no further row can be produced.

        Peeks one row ahead when needed; the peeked row is still returned by
        the next call to ``next()``.
        """
        if self._pending is not _NOT_FETCHED:
            return False
        if self._exhausted:
            return True
        raw = self._result.fetchone()
        if raw is None:
            self._release()
            return True
        self._pending = raw
        return False

    def __iter__(self) -> "RowIterator":
        return self

    def __next__(self) -> Row:
        raw = self._fetch()
        if raw is None:
            raise StopIteration
        return self._adapt(raw)

    def close(self) -> None:
        """Release the cursor before the end of the rows."""
        self._pending = _NOT_FETCHED
        if not self._exhausted:
            self._release()

    def __enter__(self) -> "RowIterator":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
