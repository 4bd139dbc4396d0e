"""Parameter binding markers and the description decorator.

Bindings are attached to handler parameters either as ``Annotated`` metadata
or as the parameter's default value::

    def get_user(self, user_id: Annotated[int, PathVariable("id")]): ...
    def search(self, q: str = RequestParam(required=False, default="")): ...
"""

from dataclasses import dataclass

DESCRIPTION_ATTR = "__api_description__"


@dataclass(frozen=True)
class RequestBody:
    """The parameter is bound from the request body."""

    required: bool = True


@dataclass(frozen=True)
class RequestParam:
    """The parameter is bound from a query-string parameter."""

    name: str = ""
    required: bool = True
    default: str | None = None


@dataclass(frozen=True)
class PathVariable:
    """The parameter is bound from a path template variable."""

    name: str = ""
    required: bool = True


@dataclass(frozen=True)
class RequestHeader:
    """The parameter is bound from a request header."""

    name: str = ""
    required: bool = True
    default: str | None = None


# Checked in this order; the first one found wins.
BINDING_TYPES = (RequestBody, RequestParam, PathVariable, RequestHeader)


@dataclass(frozen=True)
class ApiDescription:
    value: str = ""
    summary: str = ""


def api_description(value: str = "", summary: str = ""):
    """Attach a human description to a controller class or a handler.

    A handler-level description replaces the class-level one entirely.
    When ``summary`` is empty the first sentence of ``value`` is used.
    """

    def decorator(target):
        setattr(target, DESCRIPTION_ATTR, ApiDescription(value=value, summary=summary))
        return target

    return decorator
