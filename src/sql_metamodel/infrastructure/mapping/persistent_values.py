"""Per-invocation column values handed to statement binders."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..schema.core import Column


class PersistentValues:
    """
    Column values for one statement invocation.

    ``where_values`` feed predicates, ``upsert_values`` feed the written
    columns of inserts and updates. A column missing from a mapping is not
    bound; a column mapped to None is bound to SQL null.
    """

    def __init__(
        self,
        where_values: Optional[Mapping[Column, Any]] = None,
        upsert_values: Optional[Mapping[Column, Any]] = None,
    ):
        self.where_values: Dict[Column, Any] = dict(where_values or {})
        self.upsert_values: Dict[Column, Any] = dict(upsert_values or {})

    def put_where_value(self, column: Column, value: Any) -> "PersistentValues":
        self.where_values[column] = value
        return self

    def put_upsert_value(self, column: Column, value: Any) -> "PersistentValues":
        self.upsert_values[column] = value
        return self

    def clear(self) -> None:
        self.where_values.clear()
        self.upsert_values.clear()

    def __repr__(self) -> str:
        where = {c.absolute_name: v for c, v in self.where_values.items()}
        upsert = {c.absolute_name: v for c, v in self.upsert_values.items()}
        return f"PersistentValues(where_values={where!r}, upsert_values={upsert!r})"
