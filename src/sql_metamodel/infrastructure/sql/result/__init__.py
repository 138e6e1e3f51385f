"""Result-side adapters: rows and the lazy row iterator."""

from .row import Row
from .row_iterator import RowIterator

__all__ = ["Row", "RowIterator"]
