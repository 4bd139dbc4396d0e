"""Type-hint introspection: descriptors and the simple-type rule."""

import collections.abc
import sys
import types
import typing
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Annotated, Any, Literal, TypeVar, Union
from uuid import UUID

from .base import TypeDescriptor, TypeKind

PRIMITIVE_TYPES = (str, int, float, bool, bytes, complex, type(None))
WRAPPER_TYPES = (Decimal, Fraction, UUID, bytearray)
DATE_TIME_TYPES = (datetime, date, time, timedelta)

# Types from these top-level packages are never expanded into schemas.
FRAMEWORK_NAMESPACES = frozenset(
    {"api_spec_scanner", "pydantic", "pydantic_core", "annotated_types", "typing_extensions"}
)
STDLIB_NAMESPACES = frozenset(sys.stdlib_module_names) | {"builtins"}

_UNION_TYPES = (Union, types.UnionType)


def unwrap_annotated(tp: Any) -> tuple[Any, tuple]:
    """Split ``Annotated[T, *meta]`` into ``(T, meta)``."""
    if typing.get_origin(tp) is Annotated:
        return tp.__origin__, tuple(tp.__metadata__)
    return tp, ()


def strip_optional(tp: Any) -> Any:
    """``Optional[T]`` -> ``T``; other unions are left alone."""
    if typing.get_origin(tp) in _UNION_TYPES:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def split_metadata(tp: Any) -> tuple[Any, tuple]:
    """Like ``normalize`` but keeps the ``Annotated`` metadata of both layers.

    ``Optional[Annotated[str, Size(max=3)]]`` -> ``(str, (Size(max=3),))``.
    """
    tp, outer = unwrap_annotated(tp)
    tp, inner = unwrap_annotated(strip_optional(tp))
    return tp, outer + inner


def normalize(tp: Any) -> Any:
    """Drop ``Annotated`` and ``Optional`` layers."""
    tp, _ = unwrap_annotated(tp)
    tp = strip_optional(tp)
    tp, _ = unwrap_annotated(tp)
    return tp


def generic_parts(tp: Any) -> tuple[Any, tuple]:
    """Return ``(origin, args)`` of a parametrized type, or ``(None, ())``.

    Pydantic generic models parametrize into real subclasses rather than
    typing aliases; their origin and arguments live in
    ``__pydantic_generic_metadata__``.
    """
    origin = typing.get_origin(tp)
    if origin is not None:
        args = tuple(a for a in typing.get_args(tp) if a is not Ellipsis)
        return origin, args
    metadata = getattr(tp, "__pydantic_generic_metadata__", None)
    if isinstance(tp, type) and metadata and metadata.get("origin") is not None:
        return metadata["origin"], tuple(metadata.get("args", ()))
    return None, ()


def raw_type(tp: Any) -> Any:
    origin, _ = generic_parts(tp)
    return origin if origin is not None else tp


def is_concrete_class(tp: Any) -> bool:
    """True for a plain class that is not itself parametrized."""
    tp = normalize(tp)
    # typing.Any is a class on newer interpreters
    return tp is not Any and isinstance(tp, type) and generic_parts(tp)[0] is None


def simple_name(tp: Any) -> str:
    raw = raw_type(normalize(tp))
    if raw is None or raw is type(None):
        return "None"
    if isinstance(raw, str):
        return raw
    name = getattr(raw, "__name__", None) or getattr(raw, "_name", None)
    return name or repr(raw)


def full_name(tp: Any) -> str:
    raw = raw_type(normalize(tp))
    if raw is None or raw is type(None):
        return "None"
    if isinstance(raw, str):
        return raw
    module = getattr(raw, "__module__", None)
    qualname = getattr(raw, "__qualname__", None) or simple_name(raw)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def classify(tp: Any) -> TypeKind:
    raw = raw_type(normalize(tp))
    if raw is None or raw in PRIMITIVE_TYPES:
        return TypeKind.PRIMITIVE
    if not isinstance(raw, type):
        return TypeKind.COMPOUND
    if raw in WRAPPER_TYPES:
        return TypeKind.WRAPPER
    if issubclass(raw, DATE_TIME_TYPES):
        return TypeKind.DATE_TIME
    if issubclass(raw, collections.abc.Mapping):
        return TypeKind.MAP
    if issubclass(raw, collections.abc.Collection) and not issubclass(raw, (str, bytes, bytearray)):
        return TypeKind.COLLECTION
    return TypeKind.COMPOUND


def describe(tp: Any) -> TypeDescriptor:
    """Build an immutable descriptor for a type hint."""
    tp = normalize(tp)
    origin, args = generic_parts(tp)
    if origin is Literal:
        args = ()
    return TypeDescriptor(
        simple_name=simple_name(tp),
        full_name=full_name(tp),
        kind=classify(tp),
        type_arguments=tuple(describe(a) for a in args if _is_type_like(a)),
    )


def _is_type_like(arg: Any) -> bool:
    return (
        isinstance(arg, (type, TypeVar, str))
        or arg is None
        or arg is Any
        or typing.get_origin(arg) is not None
    )


def is_simple_type(tp: Any) -> bool:
    """Whether a type is excluded from schema expansion.

    Primitives, wrappers and date/time types, anything that is not a class
    (TypeVars, ``Any``, unresolved forward references) and every class from
    the standard library or the framework namespaces.
    """
    raw = raw_type(normalize(tp))
    if raw is None or not isinstance(raw, type):
        return True
    if raw in PRIMITIVE_TYPES or raw in WRAPPER_TYPES or raw in DATE_TIME_TYPES:
        return True
    top_level = (raw.__module__ or "").split(".", 1)[0]
    return top_level in STDLIB_NAMESPACES or top_level in FRAMEWORK_NAMESPACES
