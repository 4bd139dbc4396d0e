"""Field constraint declarations.

Declared inside ``Annotated`` metadata on DTO fields::

    class UserDTO(BaseModel):
        name: Annotated[str, NotNull(message="Name is required"), Size(min=1, max=100)]

They are read by the validation rule mapper and never enforced.
"""

from dataclasses import dataclass

INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1


@dataclass(frozen=True)
class NotNull:
    message: str = ""


@dataclass(frozen=True)
class NotEmpty:
    message: str = ""


@dataclass(frozen=True)
class NotBlank:
    message: str = ""


@dataclass(frozen=True)
class Size:
    min: int = 0
    max: int = INT_MAX
    message: str = ""


@dataclass(frozen=True)
class Min:
    value: int = 0
    message: str = ""


@dataclass(frozen=True)
class Max:
    value: int = LONG_MAX
    message: str = ""


@dataclass(frozen=True)
class Email:
    message: str = ""


@dataclass(frozen=True)
class Pattern:
    regexp: str = ""
    message: str = ""


@dataclass(frozen=True)
class Positive:
    message: str = ""


@dataclass(frozen=True)
class PositiveOrZero:
    message: str = ""


@dataclass(frozen=True)
class Negative:
    message: str = ""


@dataclass(frozen=True)
class NegativeOrZero:
    message: str = ""


@dataclass(frozen=True)
class Past:
    message: str = ""


@dataclass(frozen=True)
class PastOrPresent:
    message: str = ""


@dataclass(frozen=True)
class Future:
    message: str = ""


@dataclass(frozen=True)
class FutureOrPresent:
    message: str = ""


@dataclass(frozen=True)
class DecimalMin:
    value: str = "0"
    inclusive: bool = True
    message: str = ""


@dataclass(frozen=True)
class DecimalMax:
    value: str = "0"
    inclusive: bool = True
    message: str = ""


@dataclass(frozen=True)
class Digits:
    integer: int = 0
    fraction: int = 0
    message: str = ""
