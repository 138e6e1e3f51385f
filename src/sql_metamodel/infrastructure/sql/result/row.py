"""A single result row with positional and named access."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Sequence, Tuple, Union

from ...schema.core import Column


class Row:
    """
    Immutable view of one result row.

    Values are reachable by 0-based position (``row[0]``), by column label
    (``row["A"]``) or by Column (``row[column]``, matched on its name).
    """

    __slots__ = ("_keys", "_values", "_positions")

    def __init__(self, keys: Sequence[str], values: Sequence[Any]):
        if len(keys) != len(values):
            raise ValueError(
                f"Row has {len(values)} values for {len(keys)} keys"
            )
        self._keys: Tuple[str, ...] = tuple(keys)
        self._values: Tuple[Any, ...] = tuple(values)
        self._positions: Dict[str, int] = {k: i for i, k in enumerate(self._keys)}

    def __getitem__(self, key: Union[int, str, Column]) -> Any:
        if isinstance(key, Column):
            key = key.name
        if isinstance(key, str):
            try:
                return self._values[self._positions[key]]
            except KeyError:
                raise KeyError(
                    f"No column '{key}' in row. Available: {list(self._keys)}"
                ) from None
        return self._values[key]

    def get(self, key: Union[str, Column], default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> Tuple[str, ...]:
        return self._keys

    def values(self) -> Tuple[Any, ...]:
        return self._values

    def as_dict(self) -> Dict[str, Any]:
        return dict(zip(self._keys, self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Column):
            key = key.name
        return key in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._keys == other._keys and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._keys, self._values))

    def __repr__(self) -> str:
        return f"Row({self.as_dict()!r})"
