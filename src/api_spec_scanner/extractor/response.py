"""Describe handler return types, resolving generic wrappers.

Resolution depth is fixed:

* ``UserDTO`` -> schema of UserDTO
* ``ResponseEntity[UserDTO]`` -> genericType UserDTO, schema of UserDTO
* ``ResponseEntity[list[UserDTO]]`` -> genericType list, elementType UserDTO,
  schema of UserDTO

Anything nested deeper keeps its genericType but gets no schema.
"""

import inspect
from typing import Any, Callable

from .base import ResponseDescriptor, TypeSchema
from .parameter import handler_hints
from .type_schema import TypeSchemaExtractor
from .types import describe, generic_parts, is_concrete_class, normalize, simple_name


def return_annotation(func: Callable) -> Any:
    hints = handler_hints(func)
    if "return" in hints:
        return hints["return"]
    annotation = inspect.signature(func).return_annotation
    return None if annotation is inspect.Signature.empty else annotation


class ResponseExtractor:
    def __init__(self, type_schema_extractor: TypeSchemaExtractor | None = None):
        self.type_schema_extractor = type_schema_extractor or TypeSchemaExtractor()

    def extract(self, func: Callable) -> ResponseDescriptor:
        return self.extract_type(return_annotation(func))

    def extract_type(self, tp: Any) -> ResponseDescriptor:
        tp = normalize(tp)
        response = ResponseDescriptor(type=describe(tp))
        _, args = generic_parts(tp)

        if not args:
            response.type_schema = self._schema(tp)
            return response

        actual = normalize(args[0])
        if is_concrete_class(actual):
            response.generic_type = simple_name(actual)
            response.type_schema = self._schema(actual)
            return response

        origin, nested_args = generic_parts(actual)
        if origin is None:
            # TypeVar, Any or an unresolved forward reference
            return response
        response.generic_type = simple_name(actual)
        if nested_args and is_concrete_class(nested_args[0]):
            element = normalize(nested_args[0])
            response.element_type = simple_name(element)
            response.type_schema = self._schema(element)
        return response

    def _schema(self, tp: Any) -> TypeSchema | None:
        schema = self.type_schema_extractor.extract(tp)
        return None if schema.is_empty else schema
