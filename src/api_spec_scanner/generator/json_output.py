"""JSON rendering of the specification document."""

from api_spec_scanner.extractor.base import ApiSpecDocument


def render_json(document: ApiSpecDocument) -> str:
    """Pretty-printed JSON with camelCase keys; absent optional members are omitted."""
    return document.model_dump_json(by_alias=True, exclude_none=True, indent=2)
