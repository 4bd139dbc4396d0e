"""Lazily generated, cached specification for serving from a running app."""

import threading

from api_spec_scanner.config import ScanConfig
from api_spec_scanner.extractor.base import ApiSpecDocument
from api_spec_scanner.registry.advice import AdviceRegistry
from api_spec_scanner.registry.endpoints import EndpointRegistry

from .html import render_html
from .json_output import render_json
from .spec import ApiSpecGenerator


class SpecView:
    """Holds the current document. Generation happens on first access or refresh()."""

    def __init__(
        self,
        registry: EndpointRegistry,
        advice: AdviceRegistry | None = None,
        config: ScanConfig | None = None,
    ):
        config = (config or ScanConfig()).model_copy(
            update={"enable_console_output": False, "enable_file_output": False}
        )
        self.registry = registry
        self.advice = advice
        self.generator = ApiSpecGenerator(config)
        self._lock = threading.Lock()
        self._current: ApiSpecDocument | None = None

    def get(self) -> ApiSpecDocument:
        with self._lock:
            if self._current is None:
                self._current = self.generator.generate(self.registry, self.advice)
            return self._current

    def refresh(self) -> ApiSpecDocument:
        document = self.generator.generate(self.registry, self.advice)
        with self._lock:
            self._current = document
        return document

    def as_json(self) -> str:
        return render_json(self.get())

    def as_html(self) -> str:
        return render_html(self.get())
