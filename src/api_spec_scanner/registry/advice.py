"""Globally registered exception-handling (advice) classes."""

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

EXCEPTION_HANDLER_ATTR = "__exception_handler__"
RESPONSE_STATUS_ATTR = "__response_status__"


class AdviceKind(str, Enum):
    CONTROLLER_ADVICE = "ControllerAdvice"
    REST_CONTROLLER_ADVICE = "RestControllerAdvice"


def exception_handler(*exception_types: type[BaseException]):
    """Mark an advice method as the handler for the given exception types.

    With no types, they are taken from the method's exception-typed parameters.
    """

    def decorator(func):
        setattr(func, EXCEPTION_HANDLER_ATTR, tuple(exception_types))
        return func

    return decorator


def response_status(status: int | HTTPStatus):
    """Declare the HTTP status a handler responds with."""

    def decorator(func):
        setattr(func, RESPONSE_STATUS_ATTR, HTTPStatus(status))
        return func

    return decorator


@dataclass(frozen=True)
class AdviceInfo:
    advice_class: type
    kind: AdviceKind


class AdviceRegistry:
    """Ordered collection of advice classes."""

    def __init__(self):
        self._advices: list[AdviceInfo] = []

    def controller_advice(self, cls: type) -> type:
        self._advices.append(AdviceInfo(advice_class=cls, kind=AdviceKind.CONTROLLER_ADVICE))
        return cls

    def rest_controller_advice(self, cls: type) -> type:
        self._advices.append(AdviceInfo(advice_class=cls, kind=AdviceKind.REST_CONTROLLER_ADVICE))
        return cls

    def advices(self) -> list[AdviceInfo]:
        return list(self._advices)

    def __len__(self) -> int:
        return len(self._advices)
