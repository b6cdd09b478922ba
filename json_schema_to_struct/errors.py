"""
Exceptions raised by the parser, resolver and emitter.

Every error is terminal: nothing is retried and no partial result is
returned to the caller.
"""

from __future__ import annotations

from typing import Any


class SchemaToStructError(Exception):
    """Base class for all errors raised by json_schema_to_struct."""


class DecodeError(SchemaToStructError):
    """Raised when a schema document cannot be decoded into an AST.

    Attributes:
        path: JSON-pointer-like location of the failing node ("#" is the root)
    """

    def __init__(self, message: str, path: str = "#"):
        super().__init__(f"{message} (at {path})")
        self.path = path


class InvalidJSON(DecodeError):
    """Raised when the input is not a syntactically valid JSON document."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"invalid JSON at offset {offset}: {message}")
        self.offset = offset


class UnsupportedType(DecodeError):
    """Raised when a `type` token is not one of the seven primitive types."""

    def __init__(self, token: Any, path: str = "#"):
        super().__init__(f"unsupported type: {token!r}", path)
        self.token = token


class InvalidTypeValue(DecodeError):
    """Raised when `type` is neither a string nor a non-empty array of strings."""

    def __init__(self, value: Any, path: str = "#"):
        super().__init__(f"invalid type value: {value!r}, expected string or array", path)
        self.value = value


class UnsupportedFormat(DecodeError):
    """Raised when a `format` token is not part of the string format vocabulary."""

    def __init__(self, token: Any, path: str = "#"):
        super().__init__(f"unsupported format: {token!r}", path)
        self.token = token


class InvalidKeywordValue(DecodeError):
    """Raised when a known keyword carries a value of the wrong JSON shape."""

    def __init__(self, keyword: str, value: Any, expected: str, path: str = "#"):
        super().__init__(f"invalid value for {keyword!r}: {value!r}, expected {expected}", path)
        self.keyword = keyword
        self.value = value


class SchemaNameError(SchemaToStructError):
    """Raised when a URI cannot yield a usable type name.

    Attributes:
        uri: The offending URI
        property_name: Name of the property whose $ref failed, when known
    """

    def __init__(self, message: str, uri: str, property_name: str | None = None):
        message = f"{message}: {uri!r}"
        if property_name is not None:
            message = f"property {property_name!r}: {message}"
        super().__init__(message)
        self.uri = uri
        self.property_name = property_name


class MalformedURI(SchemaNameError):
    def __init__(self, uri: str, reason: str = "", property_name: str | None = None):
        message = f"malformed URI ({reason})" if reason else "malformed URI"
        super().__init__(message, uri, property_name)
        self.reason = reason


class InvalidSchemaName(SchemaNameError):
    def __init__(self, uri: str, property_name: str | None = None):
        super().__init__("invalid schema name", uri, property_name)


class ResolutionError(SchemaToStructError):
    """Raised when a property cannot be mapped to a target type."""


class UnsupportedSchemaType(ResolutionError):
    """Raised when a type/format/ref combination matches no resolution rule.

    Attributes:
        schema_type: The offending type flags
        string_format: The declared format, if any
        property_name: Name of the property being resolved, when known
    """

    def __init__(self, schema_type, string_format=None, property_name: str | None = None):
        fmt = string_format.value if string_format is not None else None
        message = f"unsupported schema type {schema_type} with format {fmt!r}"
        if property_name is not None:
            message = f"property {property_name!r}: {message}"
        super().__init__(message)
        self.schema_type = schema_type
        self.string_format = string_format
        self.property_name = property_name


class EmissionError(SchemaToStructError):
    """Raised when a struct declaration cannot be produced."""


class NoProperties(EmissionError):
    def __init__(self, schema_id: str):
        super().__init__(f"schema {schema_id!r} has no properties")
        self.schema_id = schema_id


class FormatError(EmissionError):
    """Raised when the formatter rejects the generated source."""

    def __init__(self, formatter: str, reason: str):
        super().__init__(f"{formatter} failed to format generated code: {reason}")
        self.formatter = formatter
        self.reason = reason


class OutputValidationError(EmissionError):
    """Raised when generated code fails validation before being written."""


class DuplicateFieldName(EmissionError):
    """Raised when two properties map to the same field name."""

    def __init__(self, field_name: str, first: str, second: str):
        super().__init__(f"properties {first!r} and {second!r} both map to field {field_name!r}")
        self.field_name = field_name
        self.properties = (first, second)
