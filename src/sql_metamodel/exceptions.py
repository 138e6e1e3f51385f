"""Error hierarchy for the schema metamodel and statement binding.

Every error raised by this package derives from MetamodelError and can be
converted to a structured dict for logging. Driver errors raised while
executing statements are not wrapped: they reach the caller unchanged.
"""

from typing import Any, Dict, Optional


class MetamodelError(Exception):
    """Base class for errors raised by sql_metamodel."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
        }


class ConfigurationError(MetamodelError):
    """Malformed schema graph or statement positions, detected at construction."""


class BindingError(MetamodelError):
    """A value was bound to a column the statement does not know about."""

    def __init__(self, message: str, column: Optional[str] = None):
        self.column = column
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["column"] = self.column
        return data


class ClassificationError(MetamodelError):
    """An accessor does not follow the get/set/is naming convention."""

    def __init__(self, accessor_name: str, message: str):
        self.accessor_name = accessor_name
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["accessor_name"] = self.accessor_name
        return data


class NamingConventionError(ClassificationError):
    """Accessor name starts with none of the recognized prefixes."""


class ShapeMismatchError(ClassificationError):
    """Accessor name matches a prefix but its signature does not fit it."""

    def __init__(self, accessor_name: str, message: str, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(accessor_name, message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected"] = self.expected
        data["actual"] = self.actual
        return data


__all__ = [
    "MetamodelError",
    "ConfigurationError",
    "BindingError",
    "ClassificationError",
    "NamingConventionError",
    "ShapeMismatchError",
]
