from pathlib import Path

import pytest

from api_spec_scanner.config import DEFAULT_OUTPUT_PATH, READ_METHODS, ScanConfig

FIXTURES = Path(__file__).parent / "fixtures"


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.enable_console_output is False
        assert config.enable_file_output is True
        assert config.output_file_path == DEFAULT_OUTPUT_PATH
        assert config.include_path_patterns == set()
        assert config.sort_endpoints is True

    def test_html_path_sits_beside_json(self):
        config = ScanConfig(output_file_path=Path("build/spec/out.json"))
        assert config.html_output_path == Path("build/spec/out.html")

    def test_method_presets(self):
        assert ScanConfig().only_get_methods().include_http_methods == {"GET"}
        assert ScanConfig().only_read_methods().include_http_methods == READ_METHODS

    def test_excluding_adds_patterns(self):
        config = ScanConfig(exclude_path_patterns={"/error"}).excluding("/internal/**", "/actuator/**")
        assert config.exclude_path_patterns == {"/error", "/internal/**", "/actuator/**"}

    def test_custom_filter_is_not_serialized(self):
        config = ScanConfig(custom_endpoint_filter=lambda path: True)
        assert "custom_endpoint_filter" not in config.model_dump()


class TestFromYaml:
    def test_load_fixture(self):
        config = ScanConfig.from_yaml(FIXTURES / "config.yaml")
        assert config.application_name == "shop-api"
        assert config.version == "2.1.0"
        assert config.exclude_path_patterns == {"/internal/**"}
        assert config.include_http_methods == {"GET", "POST"}

    def test_empty_file_gives_defaults(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert ScanConfig.from_yaml(f) == ScanConfig()

    def test_non_mapping_is_rejected(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            ScanConfig.from_yaml(f)
