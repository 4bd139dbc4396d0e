from api_spec_scanner.config import ScanConfig
from api_spec_scanner.generator.html import format_rule, render_html
from api_spec_scanner.generator.spec import ApiSpecGenerator

from sample_app import advice, app


def _document(**config):
    return ApiSpecGenerator(ScanConfig(**config)).generate(app, advice)


class TestFormatRule:
    def test_marker(self):
        assert format_rule({"kind": "notNull"}) == "notNull"

    def test_attributes_and_message(self):
        rule = {"message": "name length", "kind": "size", "min": 2, "max": 50}
        assert format_rule(rule) == "size(min=2, max=50): name length"


class TestRenderHtml:
    def test_overview_and_endpoints(self):
        html = render_html(_document(application_name="shop-api"))
        assert html.startswith("<!DOCTYPE html>")
        assert "shop-api" in html
        assert "/api/users/{id}" in html
        assert 'class="method-badge method-DELETE"' in html
        assert 'class="method-badge method-ANY"' in html

    def test_schema_rules_and_status(self):
        html = render_html(_document())
        assert "size(min=2, max=50): name length" in html
        assert "404 Not Found" in html
        assert "503 Service Unavailable" in html
        assert "RestControllerAdvice" in html

    def test_descriptions(self):
        html = render_html(_document())
        assert "Get user" in html
        assert "User management endpoints." in html

    def test_cyclic_schema_is_marked(self):
        assert "(cyclic reference)" in render_html(_document())

    def test_values_are_escaped(self):
        html = render_html(_document(application_name="<script>alert(1)</script>"))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_rendering_is_pure(self):
        document = _document()
        assert render_html(document) == render_html(document)

    def test_no_endpoints(self):
        from api_spec_scanner.registry import EndpointRegistry

        html = render_html(ApiSpecGenerator().generate(EndpointRegistry()))
        assert "No endpoints registered." in html
