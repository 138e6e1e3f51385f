"""Positional statement binders for select/insert/update/delete."""

from .base import CRUDOperation, WriteOperation
from .delete import DeleteOperation
from .insert import InsertOperation
from .select import SelectOperation
from .update import UpdateOperation

__all__ = [
    "CRUDOperation",
    "WriteOperation",
    "SelectOperation",
    "InsertOperation",
    "UpdateOperation",
    "DeleteOperation",
]
