"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: decode a schema document into a `Schema` tree
without doing any language-specific processing. Only the keywords the
generator knows about are read; every other key is ignored.
"""

from __future__ import annotations

import json
from typing import Any

from ..errors import (
    InvalidJSON,
    InvalidKeywordValue,
    InvalidTypeValue,
    UnsupportedFormat,
    UnsupportedType,
)
from .nodes import FORMAT_TOKENS, TYPE_TOKENS, Schema, SchemaType, StringFormat


def parse(data: bytes | str) -> Schema:
    """
    Parse a JSON Schema document into an AST.

    Args:
        data: The raw document, as bytes or text

    Returns:
        The root Schema node

    Raises:
        DecodeError: If the document is not valid JSON or a keyword is invalid
    """
    try:
        document = json.loads(data)
    except json.JSONDecodeError as e:
        raise InvalidJSON(e.msg, e.pos) from e
    except UnicodeDecodeError as e:
        raise InvalidJSON(e.reason, e.start) from e
    return SchemaParser().parse(document)


def parse_dict(document: Any) -> Schema:
    """Parse an already decoded JSON value into an AST."""
    return SchemaParser().parse(document)


class SchemaParser:
    """Decodes JSON values into Schema nodes."""

    NUMERIC_KEYWORDS = {
        "multipleOf": "multiple_of",
        "maximum": "maximum",
        "exclusiveMaximum": "exclusive_maximum",
        "minimum": "minimum",
        "exclusiveMinimum": "exclusive_minimum",
    }

    LENGTH_KEYWORDS = {
        "minLength": "min_length",
        "maxLength": "max_length",
    }

    def parse(self, document: Any) -> Schema:
        return self._parse_schema_node(document, "#")

    def _parse_schema_node(self, schema: Any, path: str) -> Schema:
        """
        Parse a schema node recursively.

        Args:
            schema: The decoded JSON value of the node
            path: Current path in the document (for error messages)

        Returns:
            The Schema node
        """
        if not isinstance(schema, dict):
            raise InvalidKeywordValue("schema", schema, "an object", path)

        fields: dict[str, Any] = {}

        if "$id" in schema:
            fields["id"] = self._parse_string(schema, "$id", path)
        if "$ref" in schema:
            fields["ref"] = self._parse_string(schema, "$ref", path)
        if "type" in schema:
            fields["type"] = self.parse_type(schema["type"], path)
        if "format" in schema:
            fields["format"] = self.parse_format(schema["format"], path)
        if "pattern" in schema:
            fields["pattern"] = self._parse_string(schema, "pattern", path)

        for keyword, attribute in self.NUMERIC_KEYWORDS.items():
            if keyword in schema:
                fields[attribute] = self._parse_number(schema, keyword, path)

        for keyword, attribute in self.LENGTH_KEYWORDS.items():
            if keyword in schema:
                fields[attribute] = self._parse_length(schema, keyword, path)

        if "properties" in schema:
            fields["properties"] = self._parse_properties(schema["properties"], path)

        return Schema(**fields)

    def parse_type(self, value: Any, path: str = "#") -> SchemaType:
        """
        Decode the `type` keyword.

        A single token yields one flag; an array of tokens yields the union
        of their flags, regardless of order.
        """
        if isinstance(value, str):
            return self._type_token(value, path)

        if isinstance(value, list) and value:
            result = SchemaType(0)
            for token in value:
                if not isinstance(token, str):
                    raise InvalidTypeValue(value, f"{path}/type")
                result |= self._type_token(token, path)
            return result

        raise InvalidTypeValue(value, f"{path}/type")

    def _type_token(self, token: str, path: str) -> SchemaType:
        try:
            return TYPE_TOKENS[token]
        except KeyError:
            raise UnsupportedType(token, f"{path}/type") from None

    def parse_format(self, value: Any, path: str = "#") -> StringFormat:
        """Decode the `format` keyword."""
        if not isinstance(value, str):
            raise InvalidKeywordValue("format", value, "a string", path)
        try:
            return FORMAT_TOKENS[value]
        except KeyError:
            raise UnsupportedFormat(value, f"{path}/format") from None

    def _parse_properties(self, value: Any, path: str) -> dict[str, Schema]:
        if not isinstance(value, dict):
            raise InvalidKeywordValue("properties", value, "an object", path)
        return {name: self._parse_schema_node(child, f"{path}/properties/{name}") for name, child in value.items()}

    def _parse_string(self, schema: dict[str, Any], keyword: str, path: str) -> str:
        value = schema[keyword]
        if not isinstance(value, str):
            raise InvalidKeywordValue(keyword, value, "a string", path)
        return value

    def _parse_number(self, schema: dict[str, Any], keyword: str, path: str) -> float:
        value = schema[keyword]
        # bool is a subclass of int, but JSON true/false are not numbers
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidKeywordValue(keyword, value, "a number", path)
        return float(value)

    def _parse_length(self, schema: dict[str, Any], keyword: str, path: str) -> int:
        value = schema[keyword]
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidKeywordValue(keyword, value, "a non-negative integer", path)
        return value
