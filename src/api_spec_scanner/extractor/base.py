"""Data models for the generated API specification.

All extractors produce these models; the renderers consume them. Field
names are snake_case in Python and camelCase on the wire.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api_spec_scanner.registry.constraints import INT_MAX, LONG_MAX


class SpecModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TypeKind(str, Enum):
    PRIMITIVE = "primitive"
    WRAPPER = "wrapper"
    COLLECTION = "collection"
    MAP = "map"
    DATE_TIME = "dateTime"
    COMPOUND = "compound"


class TypeDescriptor(SpecModel):
    """Name, kind and type arguments of a declared type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    simple_name: str
    full_name: str
    kind: TypeKind
    type_arguments: tuple["TypeDescriptor", ...] = ()


# -- validation rules ---------------------------------------------------------


class _Rule(SpecModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    message: str | None = None


class MarkerRule(_Rule):
    """A constraint with no attributes besides its message."""

    kind: Literal[
        "notNull",
        "notEmpty",
        "notBlank",
        "email",
        "positive",
        "positiveOrZero",
        "negative",
        "negativeOrZero",
        "past",
        "pastOrPresent",
        "future",
        "futureOrPresent",
    ]


class SizeRule(_Rule):
    kind: Literal["size"] = "size"
    min: int = 0
    max: int = INT_MAX


class MinRule(_Rule):
    kind: Literal["min"] = "min"
    value: int = 0


class MaxRule(_Rule):
    kind: Literal["max"] = "max"
    value: int = LONG_MAX


class PatternRule(_Rule):
    kind: Literal["pattern"] = "pattern"
    regexp: str


class DecimalMinRule(_Rule):
    kind: Literal["decimalMin"] = "decimalMin"
    value: str = "0"
    inclusive: bool = True


class DecimalMaxRule(_Rule):
    kind: Literal["decimalMax"] = "decimalMax"
    value: str = "0"
    inclusive: bool = True


class DigitsRule(_Rule):
    kind: Literal["digits"] = "digits"
    integer: int = 0
    fraction: int = 0


ValidationRule = Annotated[
    Union[
        MarkerRule,
        SizeRule,
        MinRule,
        MaxRule,
        PatternRule,
        DecimalMinRule,
        DecimalMaxRule,
        DigitsRule,
    ],
    Field(discriminator="kind"),
]


# -- schemas ------------------------------------------------------------------


class FieldSchema(SpecModel):
    """A single declared field of a DTO."""

    name: str
    type: TypeDescriptor
    generic_types: list[str] = []
    rules: list[ValidationRule] = []
    type_schema: "TypeSchema | None" = Field(default=None, alias="schema")  # nested DTO


class TypeSchema(SpecModel):
    """Fields plus a synthetic JSON example. Empty for simple types."""

    fields: list[FieldSchema] = []
    example: dict[str, Any] = {}
    cyclic: bool | None = None  # set when the type was already being expanded

    @property
    def is_empty(self) -> bool:
        return not self.fields and not self.cyclic


# -- endpoints ----------------------------------------------------------------


class ParameterKind(str, Enum):
    REQUEST_BODY = "REQUEST_BODY"
    REQUEST_PARAM = "REQUEST_PARAM"
    PATH_VARIABLE = "PATH_VARIABLE"
    REQUEST_HEADER = "REQUEST_HEADER"
    OTHER = "OTHER"


class ParameterDescriptor(SpecModel):
    name: str
    type: TypeDescriptor
    kind: ParameterKind
    param_name: str | None = None
    required: bool | None = None
    default_value: str | None = None
    type_schema: TypeSchema | None = Field(default=None, alias="schema")


class ResponseDescriptor(SpecModel):
    type: TypeDescriptor
    generic_type: str | None = None
    element_type: str | None = None
    type_schema: TypeSchema | None = Field(default=None, alias="schema")


class HandlerInfo(SpecModel):
    controller: str
    method: str
    full_controller_name: str


class DescriptionInfo(SpecModel):
    description: str | None = None
    summary: str | None = None


class EndpointDescriptor(SpecModel):
    """A registered route with everything extracted from its handler."""

    paths: list[str]
    methods: list[str]
    consumes: list[str] = []
    produces: list[str] = []
    handler: HandlerInfo
    description: DescriptionInfo | None = None
    parameters: list[ParameterDescriptor] = []
    response: ResponseDescriptor


class HttpStatusInfo(SpecModel):
    code: int
    reason_phrase: str


class ExceptionHandlerDescriptor(SpecModel):
    exception_types: list[str]
    handler: HandlerInfo
    http_status: HttpStatusInfo | None = None
    response: ResponseDescriptor
    advice_kind: str


class ApiSpecDocument(SpecModel):
    """The full specification produced by one generation call."""

    application_name: str
    version: str
    generated_at: str  # ISO-8601
    endpoints: list[EndpointDescriptor] = []
    exception_handlers: list[ExceptionHandlerDescriptor] = []


FieldSchema.model_rebuild()
