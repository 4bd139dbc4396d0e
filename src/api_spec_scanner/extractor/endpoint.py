"""Build one EndpointDescriptor per registered route."""

from api_spec_scanner.config import ScanConfig
from api_spec_scanner.registry.endpoints import EndpointRegistry, RouteInfo

from .base import EndpointDescriptor, HandlerInfo
from .description import DescriptionResolver
from .filter import should_include
from .parameter import ParameterExtractor
from .response import ResponseExtractor

METHOD_ANY = "ANY"


def route_methods(route: RouteInfo) -> list[str]:
    return sorted(set(route.methods)) or [METHOD_ANY]


class EndpointExtractor:
    def __init__(
        self,
        parameter_extractor: ParameterExtractor | None = None,
        response_extractor: ResponseExtractor | None = None,
        description_resolver: DescriptionResolver | None = None,
    ):
        self.parameter_extractor = parameter_extractor or ParameterExtractor()
        self.response_extractor = response_extractor or ResponseExtractor()
        self.description_resolver = description_resolver or DescriptionResolver()

    def extract(self, registry: EndpointRegistry, config: ScanConfig) -> list[EndpointDescriptor]:
        """Describe every route that passes the filter, in registry order."""
        endpoints = []
        for route in registry.routes():
            if not should_include(route.paths, route_methods(route), config):
                continue
            endpoints.append(self.extract_route(route))
        return endpoints

    def extract_route(self, route: RouteInfo) -> EndpointDescriptor:
        handler = route.handler
        return EndpointDescriptor(
            paths=sorted(set(route.paths)),
            methods=route_methods(route),
            consumes=sorted(set(route.consumes)),
            produces=sorted(set(route.produces)),
            handler=HandlerInfo(
                controller=handler.controller,
                method=handler.name,
                full_controller_name=handler.full_controller_name,
            ),
            description=self.description_resolver.resolve(handler.func, handler.owner),
            parameters=self.parameter_extractor.extract(handler.func),
            response=self.response_extractor.extract(handler.func),
        )
