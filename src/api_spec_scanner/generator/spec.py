"""Run the extractors over a registry and package the result as a document."""

import logging
from datetime import datetime

import click

from api_spec_scanner.config import ScanConfig
from api_spec_scanner.extractor.base import ApiSpecDocument
from api_spec_scanner.extractor.description import DescriptionResolver
from api_spec_scanner.extractor.endpoint import EndpointExtractor
from api_spec_scanner.extractor.exception_handler import ExceptionHandlerExtractor
from api_spec_scanner.extractor.parameter import ParameterExtractor
from api_spec_scanner.extractor.response import ResponseExtractor
from api_spec_scanner.extractor.type_schema import TypeSchemaExtractor
from api_spec_scanner.registry.advice import AdviceRegistry
from api_spec_scanner.registry.endpoints import EndpointRegistry

from .html import render_html
from .json_output import render_json
from .output import write_output

logger = logging.getLogger(__name__)

CONSOLE_HEADER = "=== API Spec Scanner: API Specification ==="
CONSOLE_FOOTER = "=== API Spec Scanner: End ==="


class ApiSpecGenerator:
    """Build an ApiSpecDocument from an endpoint registry and optional advice."""

    def __init__(
        self,
        config: ScanConfig | None = None,
        endpoint_extractor: EndpointExtractor | None = None,
        exception_handler_extractor: ExceptionHandlerExtractor | None = None,
    ):
        self.config = config or ScanConfig()
        if endpoint_extractor is None or exception_handler_extractor is None:
            type_schemas = TypeSchemaExtractor()
            responses = ResponseExtractor(type_schemas)
        if endpoint_extractor is None:
            endpoint_extractor = EndpointExtractor(
                parameter_extractor=ParameterExtractor(type_schemas),
                response_extractor=responses,
                description_resolver=DescriptionResolver(use_docstrings=self.config.use_docstrings),
            )
        if exception_handler_extractor is None:
            exception_handler_extractor = ExceptionHandlerExtractor(responses)
        self.endpoint_extractor = endpoint_extractor
        self.exception_handler_extractor = exception_handler_extractor

    def generate(self, registry: EndpointRegistry, advice: AdviceRegistry | None = None) -> ApiSpecDocument:
        endpoints = self.endpoint_extractor.extract(registry, self.config)
        if self.config.sort_endpoints:
            endpoints.sort(key=lambda e: (e.paths[0] if e.paths else "", e.methods[0]))

        exception_handlers = self.exception_handler_extractor.extract(advice) if advice is not None else []
        logger.debug("Extracted %d endpoints, %d exception handlers", len(endpoints), len(exception_handlers))

        return ApiSpecDocument(
            application_name=self.config.application_name,
            version=self.config.version,
            generated_at=datetime.now().isoformat(),
            endpoints=endpoints,
            exception_handlers=exception_handlers,
        )

    def generate_and_output(
        self, registry: EndpointRegistry, advice: AdviceRegistry | None = None
    ) -> ApiSpecDocument:
        """Generate, then echo and/or write the document as configured.

        Raises OutputWriteError when a file cannot be written.
        """
        document = self.generate(registry, advice)
        if self.config.enable_console_output:
            click.echo(CONSOLE_HEADER)
            click.echo(render_json(document))
            click.echo(CONSOLE_FOOTER)
        if self.config.enable_file_output:
            write_output(render_json(document), self.config.output_file_path)
            write_output(render_html(document), self.config.html_output_path)
        return document
