"""Classify handler parameters by how they are bound."""

import inspect
import logging
import typing
from typing import Any, Callable

from api_spec_scanner.registry.bindings import (
    BINDING_TYPES,
    PathVariable,
    RequestBody,
    RequestHeader,
    RequestParam,
)

from .base import ParameterDescriptor, ParameterKind
from .type_schema import TypeSchemaExtractor
from .types import describe, split_metadata

logger = logging.getLogger(__name__)

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def handler_hints(func: Callable) -> dict[str, Any]:
    """Resolved type hints of a handler, raw annotations if they cannot be resolved."""
    try:
        return typing.get_type_hints(func, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug("Falling back to raw annotations for %s: %s", func.__qualname__, e)
        return dict(getattr(func, "__annotations__", {}))


def find_binding(metadata: tuple, default: Any):
    """First binding marker in precedence order: body, param, path, header."""
    candidates = list(metadata)
    if default is not inspect.Parameter.empty:
        candidates.append(default)
    for binding_type in BINDING_TYPES:
        for candidate in candidates:
            if isinstance(candidate, binding_type):
                return candidate
    return None


def _default_text(default: Any) -> str | None:
    return None if default is None else str(default)


class ParameterExtractor:
    def __init__(self, type_schema_extractor: TypeSchemaExtractor | None = None):
        self.type_schema_extractor = type_schema_extractor or TypeSchemaExtractor()

    def extract(self, func: Callable) -> list[ParameterDescriptor]:
        """Describe every bound parameter of ``func`` in declaration order."""
        hints = handler_hints(func)
        parameters = []
        for position, param in enumerate(inspect.signature(func).parameters.values()):
            if param.kind in _SKIPPED_KINDS:
                continue
            if position == 0 and param.name in ("self", "cls"):
                continue
            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = Any
            parameters.append(self._describe(param, annotation))
        return parameters

    def _describe(self, param: inspect.Parameter, annotation: Any) -> ParameterDescriptor:
        tp, metadata = split_metadata(annotation)
        binding = find_binding(metadata, param.default)
        descriptor = ParameterDescriptor(name=param.name, type=describe(tp), kind=ParameterKind.OTHER)

        if isinstance(binding, RequestBody):
            descriptor.kind = ParameterKind.REQUEST_BODY
            descriptor.required = binding.required
            descriptor.type_schema = self.type_schema_extractor.extract(tp)
        elif isinstance(binding, RequestParam):
            descriptor.kind = ParameterKind.REQUEST_PARAM
            descriptor.param_name = binding.name or param.name
            descriptor.required = binding.required
            descriptor.default_value = _default_text(binding.default)
        elif isinstance(binding, PathVariable):
            descriptor.kind = ParameterKind.PATH_VARIABLE
            descriptor.param_name = binding.name or param.name
            descriptor.required = binding.required
        elif isinstance(binding, RequestHeader):
            descriptor.kind = ParameterKind.REQUEST_HEADER
            descriptor.param_name = binding.name or param.name
            descriptor.required = binding.required
            descriptor.default_value = _default_text(binding.default)
        return descriptor
