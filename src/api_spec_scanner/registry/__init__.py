from .advice import AdviceKind, AdviceRegistry, exception_handler, response_status
from .bindings import PathVariable, RequestBody, RequestHeader, RequestParam, api_description
from .discover import RegistryNotFoundError, discover_registries
from .endpoints import (
    EndpointRegistry,
    HandlerMethod,
    RouteInfo,
    delete_mapping,
    get_mapping,
    patch_mapping,
    post_mapping,
    put_mapping,
    request_mapping,
)

__all__ = [
    "AdviceKind",
    "AdviceRegistry",
    "EndpointRegistry",
    "HandlerMethod",
    "PathVariable",
    "RegistryNotFoundError",
    "RequestBody",
    "RequestHeader",
    "RequestParam",
    "RouteInfo",
    "api_description",
    "delete_mapping",
    "discover_registries",
    "exception_handler",
    "get_mapping",
    "patch_mapping",
    "post_mapping",
    "put_mapping",
    "request_mapping",
    "response_status",
]
