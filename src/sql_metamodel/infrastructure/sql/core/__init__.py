"""Core SQL utilities package."""

from .parameters import (
    PLACEHOLDER,
    ParsedStatement,
    build_positions,
    normalize_indexes,
    parse_template,
)

__all__ = [
    "PLACEHOLDER",
    "ParsedStatement",
    "build_positions",
    "normalize_indexes",
    "parse_template",
]
