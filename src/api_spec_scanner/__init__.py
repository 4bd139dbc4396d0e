"""Scan a registered web application and describe its API."""

from api_spec_scanner.config import ScanConfig
from api_spec_scanner.extractor.base import ApiSpecDocument
from api_spec_scanner.generator.html import render_html
from api_spec_scanner.generator.json_output import render_json
from api_spec_scanner.generator.output import OutputWriteError
from api_spec_scanner.generator.spec import ApiSpecGenerator
from api_spec_scanner.generator.view import SpecView

__version__ = "0.1.0"

__all__ = [
    "ApiSpecDocument",
    "ApiSpecGenerator",
    "OutputWriteError",
    "ScanConfig",
    "SpecView",
    "render_html",
    "render_json",
]
