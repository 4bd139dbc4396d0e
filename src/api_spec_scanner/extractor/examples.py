"""Placeholder example values keyed by a field's simple type name."""

from typing import Any

EXAMPLE_STRING = "string"
EXAMPLE_DATETIME = "2024-01-01T00:00:00"
EXAMPLE_DATE = "2024-01-01"
EXAMPLE_TIME = "00:00:00"

SCALAR_EXAMPLES: dict[str, Any] = {
    "str": EXAMPLE_STRING,
    "int": 0,
    "float": 0.0,
    "Decimal": 0.0,
    "bool": False,
    "datetime": EXAMPLE_DATETIME,
    "date": EXAMPLE_DATE,
    "time": EXAMPLE_TIME,
}

LIST_NAMES = {"list", "List", "tuple", "Tuple", "Sequence", "MutableSequence", "deque"}
SET_NAMES = {"set", "Set", "frozenset", "FrozenSet", "AbstractSet", "MutableSet"}
MAP_NAMES = {"dict", "Dict", "Mapping", "MutableMapping", "OrderedDict", "defaultdict"}


def example_value(type_name: str, generic_types: list[str] | None = None) -> Any:
    """Example for one field. Containers recurse on their first type argument."""
    if type_name in SCALAR_EXAMPLES:
        return SCALAR_EXAMPLES[type_name]
    if type_name in LIST_NAMES or type_name in SET_NAMES:
        # sets have no JSON form; they render as arrays too
        if generic_types:
            return [example_value(generic_types[0])]
        return []
    if type_name in MAP_NAMES:
        return {}
    return type_name.lower()


def example_object(fields) -> dict[str, Any]:
    """Build the example JSON object for a list of FieldSchema."""
    return {f.name: example_value(f.type.simple_name, f.generic_types) for f in fields}
