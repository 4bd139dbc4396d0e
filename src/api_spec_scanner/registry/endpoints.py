"""The route table the scanner reads.

Controllers are plain classes whose methods carry mapping decorators::

    registry = EndpointRegistry()

    @registry.controller(prefix="/api/users")
    class UserController:
        @get_mapping("/{id}")
        def get_user(self, user_id: Annotated[int, PathVariable("id")]) -> UserDTO: ...

Module-level functions can be registered with ``registry.route``.
"""

from dataclasses import dataclass
from typing import Callable, Iterator

MAPPING_ATTR = "__request_mapping__"


@dataclass(frozen=True)
class RequestMapping:
    paths: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()


@dataclass(frozen=True)
class HandlerMethod:
    """A handler function plus the controller class that owns it, if any."""

    func: Callable
    owner: type | None = None

    @property
    def name(self) -> str:
        return self.func.__name__

    @property
    def controller(self) -> str:
        if self.owner is not None:
            return self.owner.__name__
        return self.func.__module__.rsplit(".", 1)[-1]

    @property
    def full_controller_name(self) -> str:
        if self.owner is not None:
            return f"{self.owner.__module__}.{self.owner.__qualname__}"
        return self.func.__module__


@dataclass(frozen=True)
class RouteInfo:
    """One registered route: path patterns, HTTP methods, media types and handler."""

    paths: tuple[str, ...]
    methods: tuple[str, ...]
    consumes: tuple[str, ...]
    produces: tuple[str, ...]
    handler: HandlerMethod


def request_mapping(*paths: str, methods=(), consumes=(), produces=()):
    """Mark a controller method as a route handler."""

    def decorator(func):
        mapping = RequestMapping(
            paths=tuple(paths),
            methods=tuple(m.upper() for m in methods),
            consumes=tuple(consumes),
            produces=tuple(produces),
        )
        setattr(func, MAPPING_ATTR, mapping)
        return func

    return decorator


def get_mapping(*paths: str, **kwargs):
    return request_mapping(*paths, methods=("GET",), **kwargs)


def post_mapping(*paths: str, **kwargs):
    return request_mapping(*paths, methods=("POST",), **kwargs)


def put_mapping(*paths: str, **kwargs):
    return request_mapping(*paths, methods=("PUT",), **kwargs)


def delete_mapping(*paths: str, **kwargs):
    return request_mapping(*paths, methods=("DELETE",), **kwargs)


def patch_mapping(*paths: str, **kwargs):
    return request_mapping(*paths, methods=("PATCH",), **kwargs)


def _join_path(prefix: str, path: str) -> str:
    if not prefix:
        return path
    if not path:
        return prefix
    return prefix.rstrip("/") + "/" + path.lstrip("/")


class EndpointRegistry:
    """Ordered collection of routes, iterated in registration order."""

    def __init__(self):
        self._routes: list[RouteInfo] = []

    def add(
        self,
        func: Callable,
        paths=(),
        methods=(),
        consumes=(),
        produces=(),
        owner: type | None = None,
    ) -> RouteInfo:
        route = RouteInfo(
            paths=tuple(paths),
            methods=tuple(m.upper() for m in methods),
            consumes=tuple(consumes),
            produces=tuple(produces),
            handler=HandlerMethod(func=func, owner=owner),
        )
        self._routes.append(route)
        return route

    def route(self, *paths: str, methods=(), consumes=(), produces=()):
        """Register a module-level function as a handler."""

        def decorator(func):
            self.add(func, paths=paths, methods=methods, consumes=consumes, produces=produces)
            return func

        return decorator

    def controller(self, cls: type | None = None, *, prefix: str = "", consumes=(), produces=()):
        """Register every mapped method of a controller class.

        Usable bare (``@registry.controller``) or with arguments. The class
        prefix is joined to each method path; method-level media types win
        over class-level ones.
        """

        def decorator(klass):
            for attr in vars(klass).values():
                func = getattr(attr, "__func__", attr)
                mapping = getattr(func, MAPPING_ATTR, None)
                if mapping is None:
                    continue
                if mapping.paths:
                    paths = tuple(_join_path(prefix, p) for p in mapping.paths)
                else:
                    paths = (prefix,) if prefix else ()
                self.add(
                    func,
                    paths=paths,
                    methods=mapping.methods,
                    consumes=mapping.consumes or consumes,
                    produces=mapping.produces or produces,
                    owner=klass,
                )
            return klass

        if cls is not None:
            return decorator(cls)
        return decorator

    def routes(self) -> list[RouteInfo]:
        return list(self._routes)

    def __iter__(self) -> Iterator[RouteInfo]:
        return iter(self.routes())

    def __len__(self) -> int:
        return len(self._routes)
