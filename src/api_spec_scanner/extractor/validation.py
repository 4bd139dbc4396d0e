"""Map constraint declarations to normalized validation rules.

Declarations are classified by class name, so the constraint markers of
``api_spec_scanner.registry.constraints`` and the ``annotated_types``
objects pydantic stores in ``FieldInfo.metadata`` are both understood.
"""

import logging
from typing import Any, Callable

from api_spec_scanner.registry.constraints import INT_MAX, LONG_MAX

from .base import (
    DecimalMaxRule,
    DecimalMinRule,
    DigitsRule,
    MarkerRule,
    MaxRule,
    MinRule,
    PatternRule,
    SizeRule,
    ValidationRule,
)

logger = logging.getLogger(__name__)

_MISSING = object()

MARKER_KINDS = {
    "NotNull": "notNull",
    "NotEmpty": "notEmpty",
    "NotBlank": "notBlank",
    "Email": "email",
    "Positive": "positive",
    "PositiveOrZero": "positiveOrZero",
    "Negative": "negative",
    "NegativeOrZero": "negativeOrZero",
    "Past": "past",
    "PastOrPresent": "pastOrPresent",
    "Future": "future",
    "FutureOrPresent": "futureOrPresent",
}


def _attr(declaration: Any, name: str, default: Any) -> Any:
    """Read one attribute, falling back to ``default`` when absent or None."""
    value = getattr(declaration, name, _MISSING)
    if value is _MISSING or value is None:
        return default
    return value


def _message(declaration: Any) -> str | None:
    # "{...}" is an unresolved message-bundle key
    try:
        message = _attr(declaration, "message", "")
    except Exception:
        return None
    if isinstance(message, str) and message and not message.startswith("{"):
        return message
    return None


def _size(d: Any) -> SizeRule:
    return SizeRule(min=int(_attr(d, "min", 0)), max=int(_attr(d, "max", INT_MAX)), message=_message(d))


def _min(d: Any) -> MinRule:
    return MinRule(value=int(_attr(d, "value", 0)), message=_message(d))


def _max(d: Any) -> MaxRule:
    return MaxRule(value=int(_attr(d, "value", LONG_MAX)), message=_message(d))


def _pattern(d: Any) -> PatternRule | None:
    regexp = _attr(d, "regexp", "") or _attr(d, "pattern", "")
    if not regexp:
        return None
    regexp = getattr(regexp, "pattern", regexp)  # compiled re.Pattern
    return PatternRule(regexp=str(regexp), message=_message(d))


def _decimal_min(d: Any) -> DecimalMinRule:
    return DecimalMinRule(
        value=str(_attr(d, "value", "0")),
        inclusive=bool(_attr(d, "inclusive", True)),
        message=_message(d),
    )


def _decimal_max(d: Any) -> DecimalMaxRule:
    return DecimalMaxRule(
        value=str(_attr(d, "value", "0")),
        inclusive=bool(_attr(d, "inclusive", True)),
        message=_message(d),
    )


def _digits(d: Any) -> DigitsRule:
    return DigitsRule(
        integer=int(_attr(d, "integer", 0)),
        fraction=int(_attr(d, "fraction", 0)),
        message=_message(d),
    )


# annotated_types / pydantic metadata


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Non-integer bounds (floats, Decimals, dates) keep their exact text.
def _ge(d: Any) -> MinRule | DecimalMinRule:
    if _is_integer(d.ge):
        return MinRule(value=d.ge)
    return DecimalMinRule(value=str(d.ge), inclusive=True)


def _le(d: Any) -> MaxRule | DecimalMaxRule:
    if _is_integer(d.le):
        return MaxRule(value=d.le)
    return DecimalMaxRule(value=str(d.le), inclusive=True)


def _gt(d: Any) -> DecimalMinRule:
    return DecimalMinRule(value=str(d.gt), inclusive=False)


def _lt(d: Any) -> DecimalMaxRule:
    return DecimalMaxRule(value=str(d.lt), inclusive=False)


def _min_len(d: Any) -> SizeRule:
    return SizeRule(min=int(d.min_length))


def _max_len(d: Any) -> SizeRule:
    return SizeRule(max=int(d.max_length))


RULE_BUILDERS: dict[str, Callable[[Any], ValidationRule | None]] = {
    "Size": _size,
    "Min": _min,
    "Max": _max,
    "Pattern": _pattern,
    "DecimalMin": _decimal_min,
    "DecimalMax": _decimal_max,
    "Digits": _digits,
    "Ge": _ge,
    "Le": _le,
    "Gt": _gt,
    "Lt": _lt,
    "MinLen": _min_len,
    "MaxLen": _max_len,
    "_PydanticGeneralMetadata": _pattern,
}

LENGTH_DECLARATIONS = {"MinLen", "MaxLen"}


def extract_rule(declaration: Any) -> ValidationRule | None:
    """Map one declaration to a rule, or None when it is not a known constraint."""
    name = type(declaration).__name__
    if name in MARKER_KINDS:
        return MarkerRule(kind=MARKER_KINDS[name], message=_message(declaration))
    builder = RULE_BUILDERS.get(name)
    if builder is None:
        return None
    return builder(declaration)


def extract_rules(declarations) -> list[ValidationRule]:
    """Map every declaration attached to a field, in declaration order.

    Unknown declarations are ignored. A declaration whose attributes cannot
    be read is skipped without affecting the others. Adjacent ``MinLen`` and
    ``MaxLen`` metadata (pydantic's ``min_length``/``max_length``) form one
    ``size`` rule.
    """
    rules: list[ValidationRule] = []
    merge_length = False
    for declaration in declarations:
        try:
            rule = extract_rule(declaration)
        except Exception as e:
            logger.debug("Skipping constraint %r: %s", declaration, e)
            continue
        if rule is None:
            continue

        is_length = type(declaration).__name__ in LENGTH_DECLARATIONS
        if is_length and merge_length:
            rules[-1] = _merge_lengths(rules[-1], declaration)
        else:
            rules.append(rule)
        merge_length = is_length
    return rules


def _merge_lengths(rule: SizeRule, declaration: Any) -> SizeRule:
    if type(declaration).__name__ == "MinLen":
        return rule.model_copy(update={"min": int(declaration.min_length)})
    return rule.model_copy(update={"max": int(declaration.max_length)})
