"""Static HTML report rendered from the specification document with Jinja2."""

import json
from typing import Any

from jinja2 import Environment, PackageLoader

from api_spec_scanner.extractor.base import ApiSpecDocument

TEMPLATE_NAME = "api_spec.html.j2"


def format_rule(rule: dict[str, Any]) -> str:
    """``{"kind": "size", "min": 1, "max": 10}`` -> ``size(min=1, max=10)``."""
    attrs = [f"{k}={v}" for k, v in rule.items() if k not in ("kind", "message")]
    text = f"{rule['kind']}({', '.join(attrs)})" if attrs else rule["kind"]
    if rule.get("message"):
        text += f": {rule['message']}"
    return text


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("api_spec_scanner", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["rule"] = format_rule
    env.filters["pretty_json"] = pretty_json
    return env


def render_html(document: ApiSpecDocument) -> str:
    """Render the report. The output depends only on the document."""
    spec = document.model_dump(by_alias=True, exclude_none=True, mode="json")
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(spec=spec)
