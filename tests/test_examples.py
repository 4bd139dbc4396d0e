from api_spec_scanner.extractor.examples import (
    EXAMPLE_DATE,
    EXAMPLE_DATETIME,
    EXAMPLE_STRING,
    example_value,
)


class TestExampleValue:
    def test_scalars(self):
        assert example_value("str") == EXAMPLE_STRING
        assert example_value("int") == 0
        assert example_value("float") == 0.0
        assert example_value("bool") is False
        assert example_value("datetime") == EXAMPLE_DATETIME
        assert example_value("date") == EXAMPLE_DATE

    def test_list_uses_first_type_argument(self):
        assert example_value("list", ["str"]) == [EXAMPLE_STRING]
        assert example_value("list", ["int", "str"]) == [0]

    def test_list_without_type_arguments(self):
        assert example_value("list") == []
        assert example_value("list", []) == []

    def test_set_renders_as_list(self):
        assert example_value("set", ["int"]) == [0]
        assert example_value("frozenset") == []

    def test_map_is_empty_object(self):
        assert example_value("dict", ["str", "int"]) == {}

    def test_unknown_type_is_lowercased_name(self):
        assert example_value("AddressDTO") == "addressdto"
        assert example_value("list", ["AddressDTO"]) == ["addressdto"]
