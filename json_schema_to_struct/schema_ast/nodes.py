"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent the decoded structure of a JSON Schema document
before any language-specific processing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, Flag
from types import MappingProxyType


class SchemaType(Flag):
    """Primitive types of the `type` keyword.

    A schema may declare several types at once, so values combine with `|`
    and membership is tested with `in`.

    https://json-schema.org/draft/2020-12/json-schema-validation.html#rfc.section.6.1.1
    """

    STRING = 1 << 0
    NUMBER = 1 << 1
    INTEGER = 1 << 2
    OBJECT = 1 << 3
    ARRAY = 1 << 4
    BOOLEAN = 1 << 5
    NULL = 1 << 6

    def __str__(self) -> str:
        if not self:
            return "<none>"
        return "|".join(token for token, member in TYPE_TOKENS.items() if member in self)


class StringFormat(Enum):
    """Formats defined by the JSON Schema string format vocabulary.

    https://json-schema.org/understanding-json-schema/reference/string.html
    """

    DATE_TIME = "date-time"
    TIME = "time"
    DATE = "date"
    DURATION = "duration"
    EMAIL = "email"
    IDN_EMAIL = "idn-email"
    HOSTNAME = "hostname"
    IDN_HOSTNAME = "idn-hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UUID = "uuid"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    IRI = "iri"
    IRI_REFERENCE = "iri-reference"
    URI_TEMPLATE = "uri-template"
    JSON_POINTER = "json-pointer"
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    REGEX = "regex"


TYPE_TOKENS: Mapping[str, SchemaType] = MappingProxyType(
    {
        "string": SchemaType.STRING,
        "number": SchemaType.NUMBER,
        "integer": SchemaType.INTEGER,
        "object": SchemaType.OBJECT,
        "array": SchemaType.ARRAY,
        "boolean": SchemaType.BOOLEAN,
        "null": SchemaType.NULL,
    }
)

FORMAT_TOKENS: Mapping[str, StringFormat] = MappingProxyType({fmt.value: fmt for fmt in StringFormat})


@dataclass(frozen=True)
class Schema:
    """A JSON Schema document or subschema.

    Constraint keywords are kept for completeness; the emitter only reads
    `id`, `type`, `format`, `ref` and `properties`.
    """

    # $id: canonical URI naming this schema resource
    id: str = ""

    type: SchemaType = SchemaType(0)

    # Validation keywords for numeric instances
    multiple_of: float | None = None
    maximum: float | None = None
    exclusive_maximum: float | None = None
    minimum: float | None = None
    exclusive_minimum: float | None = None

    # Validation keywords for strings
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: StringFormat | None = None

    properties: Mapping[str, Schema] = field(default_factory=dict)

    # $ref: URI of another named schema
    ref: str = ""

    def __post_init__(self):
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
