"""Shared utilities: logging and accessor classification."""

from .accessors import (
    AccessorKind,
    AccessorSignature,
    TypePrinter,
    accessor_kind,
    classify,
    classify_by_name,
    property_name,
    property_value_type,
)

__all__ = [
    "AccessorKind",
    "AccessorSignature",
    "TypePrinter",
    "accessor_kind",
    "classify",
    "classify_by_name",
    "property_name",
    "property_value_type",
]
