import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import annotated_types
from pydantic import BaseModel, Field

from api_spec_scanner.extractor.base import (
    DecimalMaxRule,
    DecimalMinRule,
    DigitsRule,
    MarkerRule,
    MaxRule,
    MinRule,
    PatternRule,
    SizeRule,
)
from api_spec_scanner.extractor.type_schema import TypeSchemaExtractor
from api_spec_scanner.extractor.validation import extract_rule, extract_rules
from api_spec_scanner.registry.constraints import (
    INT_MAX,
    LONG_MAX,
    DecimalMax,
    DecimalMin,
    Digits,
    Email,
    Max,
    Min,
    NotBlank,
    NotNull,
    Pattern,
    Size,
)


class TestConstraintMarkers:
    def test_marker_rules(self):
        assert extract_rule(NotNull()) == MarkerRule(kind="notNull")
        assert extract_rule(Email(message="bad email")) == MarkerRule(kind="email", message="bad email")

    def test_size_defaults(self):
        assert extract_rule(Size()) == SizeRule(min=0, max=INT_MAX)
        assert extract_rule(Size(max=5)) == SizeRule(min=0, max=5)
        assert extract_rule(Size(min=1)) == SizeRule(min=1, max=INT_MAX)

    def test_min_max_defaults(self):
        assert extract_rule(Min()) == MinRule(value=0)
        assert extract_rule(Max()) == MaxRule(value=LONG_MAX)

    def test_pattern(self):
        assert extract_rule(Pattern(regexp=r"^\d+$")) == PatternRule(regexp=r"^\d+$")

    def test_empty_pattern_is_ignored(self):
        assert extract_rule(Pattern()) is None

    def test_decimal_and_digits(self):
        assert extract_rule(DecimalMin(value="0.01")) == DecimalMinRule(value="0.01", inclusive=True)
        assert extract_rule(DecimalMax(value="99.99", inclusive=False)) == DecimalMaxRule(value="99.99", inclusive=False)
        assert extract_rule(Digits(integer=5, fraction=2)) == DigitsRule(integer=5, fraction=2)

    def test_unresolved_message_key_is_dropped(self):
        rule = extract_rule(NotBlank(message="{javax.validation.constraints.NotBlank.message}"))
        assert rule.message is None

    def test_unknown_declaration(self):
        assert extract_rule("just a string") is None
        assert extract_rule(object()) is None


class TestAnnotatedTypes:
    def test_ge_le(self):
        assert extract_rule(annotated_types.Ge(1)) == MinRule(value=1)
        assert extract_rule(annotated_types.Le(10)) == MaxRule(value=10)

    def test_gt_lt_are_exclusive(self):
        assert extract_rule(annotated_types.Gt(0)) == DecimalMinRule(value="0", inclusive=False)
        assert extract_rule(annotated_types.Lt(1.5)) == DecimalMaxRule(value="1.5", inclusive=False)

    def test_lengths(self):
        assert extract_rule(annotated_types.MinLen(2)) == SizeRule(min=2)
        assert extract_rule(annotated_types.MaxLen(8)) == SizeRule(max=8)

    def test_fractional_bounds_keep_their_value(self):
        assert extract_rule(annotated_types.Ge(0.5)) == DecimalMinRule(value="0.5", inclusive=True)
        assert extract_rule(annotated_types.Le(99.9)) == DecimalMaxRule(value="99.9", inclusive=True)

    def test_decimal_bound(self):
        assert extract_rule(annotated_types.Ge(Decimal("0.01"))) == DecimalMinRule(value="0.01", inclusive=True)

    def test_date_bound_is_not_dropped(self):
        rules = extract_rules([annotated_types.Ge(date(2024, 1, 1))])
        assert rules == [DecimalMinRule(value="2024-01-01", inclusive=True)]

    def test_boolean_is_not_an_integer_bound(self):
        assert extract_rule(annotated_types.Le(True)).kind == "decimalMax"

    def test_min_and_max_length_form_one_size_rule(self):
        rules = extract_rules([annotated_types.MinLen(1), annotated_types.MaxLen(100)])
        assert rules == [SizeRule(min=1, max=100)]

    def test_separated_lengths_are_not_merged(self):
        rules = extract_rules([annotated_types.MinLen(1), NotNull(), annotated_types.MaxLen(100)])
        assert rules == [SizeRule(min=1), MarkerRule(kind="notNull"), SizeRule(max=100)]


class TestPydanticFieldConstraints:
    def test_numeric_and_length_bounds(self):
        class Payment(BaseModel):
            rate: float = Field(ge=0.5, le=99.9)
            amount: Decimal = Field(ge=Decimal("0.01"))
            title: str = Field(min_length=1, max_length=100)

        schema = TypeSchemaExtractor().extract(Payment)
        rules = {f.name: f.model_dump(by_alias=True, exclude_none=True)["rules"] for f in schema.fields}
        assert rules["rate"] == [
            {"kind": "decimalMin", "value": "0.5", "inclusive": True},
            {"kind": "decimalMax", "value": "99.9", "inclusive": True},
        ]
        assert rules["amount"] == [{"kind": "decimalMin", "value": "0.01", "inclusive": True}]
        assert rules["title"] == [{"kind": "size", "min": 1, "max": 100}]


class BrokenSize:
    """Looks like a Size constraint but its attributes cannot be read."""

    @property
    def min(self):
        raise RuntimeError("boom")


BrokenSize.__name__ = "Size"


class TestExtractRules:
    def test_declaration_order_is_kept(self):
        rules = extract_rules([NotNull(), Size(min=1, max=3), Email()])
        assert [r.kind for r in rules] == ["notNull", "size", "email"]

    def test_failing_declaration_is_skipped(self):
        rules = extract_rules([NotNull(), BrokenSize(), Email()])
        assert [r.kind for r in rules] == ["notNull", "email"]

    def test_unknown_declarations_are_skipped(self):
        rules = extract_rules(["doc", NotNull()])
        assert [r.kind for r in rules] == ["notNull"]

    def test_compiled_pattern(self):
        @dataclass(frozen=True)
        class Pattern:
            regexp: re.Pattern

        rules = extract_rules([Pattern(re.compile(r"[a-z]+"))])
        assert rules == [PatternRule(regexp="[a-z]+")]

    def test_serialized_form(self):
        rule = extract_rule(Size(min=1, max=10, message="1-10"))
        assert rule.model_dump(by_alias=True, exclude_none=True) == {
            "kind": "size",
            "min": 1,
            "max": 10,
            "message": "1-10",
        }
