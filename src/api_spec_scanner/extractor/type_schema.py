"""Field-level schemas for DTO types."""

import dataclasses
import inspect
import logging
import typing
from typing import Any, ClassVar

from .base import FieldSchema, TypeKind, TypeSchema
from .examples import example_object
from .types import (
    classify,
    describe,
    generic_parts,
    is_concrete_class,
    is_simple_type,
    normalize,
    raw_type,
    split_metadata,
)
from .validation import extract_rules

logger = logging.getLogger(__name__)


def declared_fields(cls: type) -> list[tuple[str, Any, tuple]]:
    """Return ``(name, annotation, constraint_declarations)`` per instance field.

    Pydantic models are read through ``model_fields``, dataclasses through
    ``dataclasses.fields``, anything else through its type hints. Class
    variables and dunder or name-mangled attributes are left out.
    """
    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, dict):
        result = []
        for name, info in model_fields.items():
            tp, meta = split_metadata(info.annotation)
            result.append((name, tp, meta + tuple(info.metadata)))
        return result

    hints = _type_hints(cls)
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    else:
        names = list(hints)

    result = []
    for name in names:
        if _is_synthetic(cls, name):
            continue
        hint = hints.get(name, Any)
        if hint is ClassVar or typing.get_origin(hint) is ClassVar:
            continue
        tp, meta = split_metadata(hint)
        result.append((name, tp, meta))
    return result


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        # unresolvable forward references: keep the raw annotations
        logger.debug("Falling back to raw annotations for %s: %s", cls.__qualname__, e)
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(inspect.get_annotations(klass))
        return hints


def _is_synthetic(cls: type, name: str) -> bool:
    return name.startswith("__") or name.startswith(f"_{cls.__name__}__")


class TypeSchemaExtractor:
    """Builds a TypeSchema for a type hint.

    Compound field types are expanded recursively. Types currently being
    expanded are tracked, so a self-referencing DTO produces a ``cyclic``
    marker instead of recursing forever. An instance is not meant to be
    shared between threads.
    """

    def __init__(self):
        self._expanding: set[Any] = set()

    def extract(self, tp: Any) -> TypeSchema:
        tp = normalize(tp)
        if is_simple_type(tp):
            return TypeSchema()

        # pydantic parametrized models are real classes with substituted fields
        cls = tp if isinstance(tp, type) else raw_type(tp)
        if cls in self._expanding:
            return TypeSchema(cyclic=True)

        self._expanding.add(cls)
        try:
            fields = [self._field_schema(name, annotation, meta) for name, annotation, meta in declared_fields(cls)]
        finally:
            self._expanding.discard(cls)

        if not fields:
            return TypeSchema()
        return TypeSchema(fields=fields, example=example_object(fields))

    def _field_schema(self, name: str, annotation: Any, declarations: tuple) -> FieldSchema:
        tp = normalize(annotation)
        _, args = generic_parts(tp)
        generic_types = [normalize(a).__name__ for a in args if is_concrete_class(a)]

        nested = None
        if classify(tp) is TypeKind.COMPOUND and not is_simple_type(tp):
            schema = self.extract(tp)
            if not schema.is_empty:
                nested = schema

        return FieldSchema(
            name=name,
            type=describe(tp),
            generic_types=generic_types,
            rules=extract_rules(declarations),
            type_schema=nested,
        )
