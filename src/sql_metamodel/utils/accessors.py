"""
Property accessor classification.

Decides whether an accessor is a getter, a setter or a boolean getter from its
name prefix (``get``/``set``/``is``) and its shape (parameter count and return
type). The mapping layer uses this to wire bean properties to table columns.

Accessors are described by an AccessorSignature, either built explicitly or
read from a Python callable with ``AccessorSignature.of``:

    >>> class Person:
    ...     def getName(self) -> str: ...
    >>> property_value_type(AccessorSignature.of(Person.getName))
    <class 'str'>
"""

from __future__ import annotations

import builtins
import inspect
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple, TypeVar

from sql_metamodel.exceptions import NamingConventionError, ShapeMismatchError

R = TypeVar("R")

GETTER_PREFIX = "get"
SETTER_PREFIX = "set"
BOOLEAN_GETTER_PREFIX = "is"

NoneType = type(None)


class AccessorKind(Enum):
    GETTER = "getter"
    SETTER = "setter"
    BOOLEAN_GETTER = "boolean_getter"


@dataclass(frozen=True)
class AccessorSignature:
    """Static shape of an accessor.

    ``return_type`` None (or NoneType) means the accessor returns nothing.
    ``typing.Any`` stands for an unannotated type and fits every shape rule
    it is checked against.
    """

    name: str
    parameter_types: Tuple[Any, ...] = ()
    return_type: Any = None
    owner: Optional[type] = None

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    @property
    def returns_void(self) -> bool:
        return self.return_type is None or self.return_type is NoneType

    @property
    def return_unknown(self) -> bool:
        return self.return_type is Any

    @classmethod
    def of(cls, func: Callable[..., Any], owner: Optional[type] = None) -> "AccessorSignature":
        """Build a signature from a function or method using its annotations."""
        signature = inspect.signature(func)
        try:
            hints = typing.get_type_hints(func)
        except (NameError, TypeError):
            hints = {}
        parameters = list(signature.parameters.values())
        if not inspect.ismethod(func) and parameters and parameters[0].name in ("self", "cls"):
            parameters = parameters[1:]
        parameter_types = tuple(
            hints.get(p.name, _resolve_annotation(p.annotation)) for p in parameters
        )
        if "return" in hints:
            return_type = hints["return"]
        else:
            return_type = _resolve_annotation(signature.return_annotation)
        if owner is None:
            owner = _owner_of(func)
        return cls(func.__name__, parameter_types, return_type, owner)


def _resolve_annotation(annotation: Any) -> Any:
    """Best effort for annotations get_type_hints could not evaluate."""
    if annotation is inspect.Parameter.empty:
        return Any
    if isinstance(annotation, str):
        if annotation == "None":
            return None
        return getattr(builtins, annotation, Any)
    return annotation


def _owner_of(func: Callable[..., Any]) -> Optional[type]:
    if inspect.ismethod(func):
        target = func.__self__
        return target if isinstance(target, type) else type(target)
    qualname = getattr(func, "__qualname__", "")
    if "." not in qualname:
        return None
    module = inspect.getmodule(func)
    owner: Any = module
    for part in qualname.split(".")[:-1]:
        owner = getattr(owner, part, None)
        if owner is None:
            return None
    return owner if isinstance(owner, type) else None


@dataclass(frozen=True)
class TypePrinter:
    """Formats types and accessors for diagnostic messages.

    ``style="flat"`` prints qualified names only, ``style="full"`` prefixes
    them with their module.
    """

    style: str = "flat"

    @classmethod
    def from_settings(cls) -> "TypePrinter":
        from sql_metamodel.config import get_settings

        return cls(get_settings().TYPE_NAME_STYLE)

    def format_type(self, value: Any) -> str:
        if value is None or value is NoneType:
            return "None"
        if value is Any:
            return "Any"
        if not isinstance(value, type):
            return repr(value)
        if self.style == "full" and value.__module__ != "builtins":
            return f"{value.__module__}.{value.__qualname__}"
        return value.__qualname__

    def format_accessor(self, accessor: AccessorSignature) -> str:
        params = ", ".join(self.format_type(t) for t in accessor.parameter_types)
        owner = f"{self.format_type(accessor.owner)}." if accessor.owner is not None else ""
        return f"{owner}{accessor.name}({params}) -> {self.format_type(accessor.return_type)}"


def _describe_shape(accessor: AccessorSignature, printer: TypePrinter) -> str:
    return (
        f"{accessor.parameter_count} parameter(s), "
        f"returns {printer.format_type(accessor.return_type)}"
    )


def _naming_error(accessor: AccessorSignature, printer: TypePrinter) -> NamingConventionError:
    return NamingConventionError(
        accessor.name,
        f"Accessor {printer.format_accessor(accessor)} doesn't fit encapsulation "
        f"naming convention (expected a '{GETTER_PREFIX}', '{SETTER_PREFIX}' "
        f"or '{BOOLEAN_GETTER_PREFIX}' prefix)",
    )


def _check_shape(
    accessor: AccessorSignature, kind: AccessorKind, printer: TypePrinter
) -> None:
    if kind is AccessorKind.GETTER:
        fits = accessor.parameter_count == 0 and not accessor.returns_void
        expected = "0 parameters, returns a value"
    elif kind is AccessorKind.SETTER:
        fits = accessor.parameter_count == 1 and (
            accessor.returns_void or accessor.return_unknown
        )
        expected = "1 parameter, returns None"
    else:
        fits = accessor.parameter_count == 0 and (
            accessor.return_type is bool or accessor.return_unknown
        )
        expected = "0 parameters, returns bool"
    if not fits:
        actual = _describe_shape(accessor, printer)
        raise ShapeMismatchError(
            accessor.name,
            f"Accessor {printer.format_accessor(accessor)} is named like a "
            f"{kind.value.replace('_', ' ')} but has {actual} (expected {expected})",
            expected=expected,
            actual=actual,
        )


def _kind_from_name(accessor: AccessorSignature, printer: TypePrinter) -> AccessorKind:
    name = accessor.name
    if name.startswith(GETTER_PREFIX):
        return AccessorKind.GETTER
    if name.startswith(SETTER_PREFIX):
        return AccessorKind.SETTER
    if name.startswith(BOOLEAN_GETTER_PREFIX):
        return AccessorKind.BOOLEAN_GETTER
    raise _naming_error(accessor, printer)


def _dispatch(
    kind: AccessorKind,
    accessor: AccessorSignature,
    on_getter: Callable[[AccessorSignature], R],
    on_setter: Callable[[AccessorSignature], R],
    on_boolean_getter: Callable[[AccessorSignature], R],
) -> R:
    if kind is AccessorKind.GETTER:
        return on_getter(accessor)
    if kind is AccessorKind.SETTER:
        return on_setter(accessor)
    return on_boolean_getter(accessor)


def classify_by_name(
    accessor: AccessorSignature,
    on_getter: Callable[[AccessorSignature], R],
    on_setter: Callable[[AccessorSignature], R],
    on_boolean_getter: Callable[[AccessorSignature], R],
    printer: Optional[TypePrinter] = None,
) -> R:
    """Dispatch on the name prefix only, without checking the accessor's shape."""
    printer = printer or TypePrinter.from_settings()
    kind = _kind_from_name(accessor, printer)
    return _dispatch(kind, accessor, on_getter, on_setter, on_boolean_getter)


def classify(
    accessor: AccessorSignature,
    on_getter: Callable[[AccessorSignature], R],
    on_setter: Callable[[AccessorSignature], R],
    on_boolean_getter: Callable[[AccessorSignature], R],
    printer: Optional[TypePrinter] = None,
) -> R:
    """Call the action matching the accessor's kind and return its result.

    Raises:
        ShapeMismatchError: name matches a prefix but parameters or return
            type don't fit it; the other branches are never tried
        NamingConventionError: name has none of the get/set/is prefixes
    """
    printer = printer or TypePrinter.from_settings()
    kind = _kind_from_name(accessor, printer)
    _check_shape(accessor, kind, printer)
    return _dispatch(kind, accessor, on_getter, on_setter, on_boolean_getter)


def accessor_kind(
    accessor: AccessorSignature, printer: Optional[TypePrinter] = None
) -> AccessorKind:
    return classify(
        accessor,
        lambda a: AccessorKind.GETTER,
        lambda a: AccessorKind.SETTER,
        lambda a: AccessorKind.BOOLEAN_GETTER,
        printer,
    )


def property_value_type(
    accessor: AccessorSignature, printer: Optional[TypePrinter] = None
) -> Any:
    """Type of the property wrapped by an accessor.

    The return type of a getter, the parameter type of a setter, bool for a
    boolean getter.
    """
    return classify(
        accessor,
        lambda a: a.return_type,
        lambda a: a.parameter_types[0],
        lambda a: bool,
        printer,
    )


def _decapitalize(name: str) -> str:
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def property_name(accessor: AccessorSignature, printer: Optional[TypePrinter] = None) -> str:
    """Name of the property wrapped by an accessor.

    ``getFirstName`` gives ``firstName``, ``get_first_name`` gives
    ``first_name`` and ``isActive`` gives ``active``.
    """
    kind = accessor_kind(accessor, printer)
    prefix = BOOLEAN_GETTER_PREFIX if kind is AccessorKind.BOOLEAN_GETTER else GETTER_PREFIX
    remainder = accessor.name[len(prefix):]
    if remainder.startswith("_"):
        return remainder.lstrip("_")
    return _decapitalize(remainder)


__all__ = [
    "AccessorKind",
    "AccessorSignature",
    "TypePrinter",
    "classify",
    "classify_by_name",
    "accessor_kind",
    "property_value_type",
    "property_name",
]
