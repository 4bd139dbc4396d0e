"""Describe the exception handlers of advice classes and infer their HTTP status."""

import inspect
from http import HTTPStatus
from typing import Callable

from api_spec_scanner.registry.advice import (
    EXCEPTION_HANDLER_ATTR,
    RESPONSE_STATUS_ATTR,
    AdviceInfo,
    AdviceRegistry,
)

from .base import ExceptionHandlerDescriptor, HandlerInfo, HttpStatusInfo
from .parameter import handler_hints
from .response import ResponseExtractor
from .types import normalize

# Ordered; the first row with a matching substring wins.
STATUS_BY_NAME: list[tuple[tuple[str, ...], HTTPStatus]] = [
    (("NotFound", "NoSuchElement", "DoesNotExist"), HTTPStatus.NOT_FOUND),
    (
        ("IllegalArgument", "Validation", "MethodArgumentNotValid", "ConstraintViolation", "ValueError"),
        HTTPStatus.BAD_REQUEST,
    ),
    (("Unauthorized", "Authentication"), HTTPStatus.UNAUTHORIZED),
    (("Forbidden", "AccessDenied", "PermissionError"), HTTPStatus.FORBIDDEN),
    (("Conflict", "Duplicate"), HTTPStatus.CONFLICT),
    (("UnsupportedOperation", "NotImplementedError"), HTTPStatus.NOT_IMPLEMENTED),
]

GENERIC_ERROR_NAMES = {"Exception", "BaseException", "RuntimeError", "RuntimeException", "NullPointerException"}


def infer_status_from_name(exception_name: str) -> HTTPStatus | None:
    """Guess a status from an exception class name, or None if nothing matches."""
    for substrings, status in STATUS_BY_NAME:
        if any(s in exception_name for s in substrings):
            return status
    if exception_name in GENERIC_ERROR_NAMES:
        return HTTPStatus.INTERNAL_SERVER_ERROR
    return None


def resolve_status(func: Callable, exception_types: list[type]) -> HTTPStatus | None:
    """Explicit ``response_status`` first, then 500 without types, then the name table."""
    declared = getattr(func, RESPONSE_STATUS_ATTR, None)
    if declared is not None:
        return HTTPStatus(declared)
    if not exception_types:
        return HTTPStatus.INTERNAL_SERVER_ERROR
    return infer_status_from_name(exception_types[0].__name__)


def exception_types_from_params(func: Callable) -> list[type]:
    hints = handler_hints(func)
    types = []
    for name in inspect.signature(func).parameters:
        tp = normalize(hints.get(name))
        if isinstance(tp, type) and issubclass(tp, BaseException):
            types.append(tp)
    return types


class ExceptionHandlerExtractor:
    def __init__(self, response_extractor: ResponseExtractor | None = None):
        self.response_extractor = response_extractor or ResponseExtractor()

    def extract(self, advice_registry: AdviceRegistry) -> list[ExceptionHandlerDescriptor]:
        handlers = []
        for advice in advice_registry.advices():
            handlers.extend(self._extract_advice(advice))
        return handlers

    def _extract_advice(self, advice: AdviceInfo) -> list[ExceptionHandlerDescriptor]:
        cls = advice.advice_class
        handlers = []
        for attr in vars(cls).values():
            func = getattr(attr, "__func__", attr)
            declared = getattr(func, EXCEPTION_HANDLER_ATTR, None)
            if declared is None:
                continue

            exception_types = list(declared) or exception_types_from_params(func)
            status = resolve_status(func, exception_types)
            handlers.append(
                ExceptionHandlerDescriptor(
                    exception_types=[t.__name__ for t in exception_types],
                    handler=HandlerInfo(
                        controller=cls.__name__,
                        method=func.__name__,
                        full_controller_name=f"{cls.__module__}.{cls.__qualname__}",
                    ),
                    http_status=(
                        HttpStatusInfo(code=status.value, reason_phrase=status.phrase) if status is not None else None
                    ),
                    response=self.response_extractor.extract(func),
                    advice_kind=advice.kind.value,
                )
            )
        return handlers
