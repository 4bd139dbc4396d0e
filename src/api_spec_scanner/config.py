"""Scanner configuration.

Built in code or loaded from a YAML file whose keys are the field names::

    application_name: shop-api
    output_file_path: build/api-spec.json
    exclude_path_patterns: ["/internal/**", "/error"]
    include_http_methods: [GET, POST]
"""

from pathlib import Path
from typing import Callable

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT_PATH = Path("build/api-spec.json")
DEFAULT_APP_NAME = "api-spec-scanner"
DEFAULT_VERSION = "0.0.1"

READ_METHODS = {"GET", "HEAD", "OPTIONS"}


class ScanConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    enable_console_output: bool = False
    enable_file_output: bool = True
    output_file_path: Path = DEFAULT_OUTPUT_PATH
    application_name: str = DEFAULT_APP_NAME
    version: str = DEFAULT_VERSION
    include_path_patterns: set[str] = set()
    exclude_path_patterns: set[str] = set()
    include_http_methods: set[str] = set()
    exclude_http_methods: set[str] = set()
    custom_endpoint_filter: Callable[[str], bool] | None = Field(default=None, exclude=True)
    sort_endpoints: bool = True
    use_docstrings: bool = False

    @field_validator("include_http_methods", "exclude_http_methods", mode="before")
    @classmethod
    def _upper_methods(cls, value):
        if value is None:
            return set()
        return {str(m).upper() for m in value}

    @property
    def html_output_path(self) -> Path:
        return self.output_file_path.with_suffix(".html")

    def only_get_methods(self) -> "ScanConfig":
        return self.model_copy(update={"include_http_methods": {"GET"}})

    def only_read_methods(self) -> "ScanConfig":
        return self.model_copy(update={"include_http_methods": set(READ_METHODS)})

    def excluding(self, *patterns: str) -> "ScanConfig":
        return self.model_copy(update={"exclude_path_patterns": self.exclude_path_patterns | set(patterns)})

    @classmethod
    def from_yaml(cls, file_path: Path) -> "ScanConfig":
        """Load a config from a YAML mapping. An empty file gives the defaults."""
        data = yaml.safe_load(Path(file_path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_path}: expected a YAML mapping, got {type(data).__name__}")
        return cls(**data)
