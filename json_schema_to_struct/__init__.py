"""JSON Schema to Struct Generator

Parses a JSON Schema document and generates a typed Python dataclass
for its named schema, resolving types, string formats and $ref targets.
"""

__version__ = "0.1.0"
__author__ = "François Lagunas"

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .emitter import StructEmitter, emit
from .errors import (
    DecodeError,
    DuplicateFieldName,
    EmissionError,
    FormatError,
    InvalidJSON,
    InvalidKeywordValue,
    InvalidSchemaName,
    InvalidTypeValue,
    MalformedURI,
    NoProperties,
    ResolutionError,
    SchemaNameError,
    SchemaToStructError,
    UnsupportedFormat,
    UnsupportedSchemaType,
    UnsupportedType,
)
from .generator import PipelineGenerator
from .naming import name_from_uri
from .resolver import ResolvedType, resolve_type
from .schema_ast import Schema, SchemaType, StringFormat, parse, parse_dict

__all__ = [
    "PipelineGenerator",
    "StructEmitter",
    "emit",
    "parse",
    "parse_dict",
    "resolve_type",
    "ResolvedType",
    "name_from_uri",
    "Schema",
    "SchemaType",
    "StringFormat",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaToStructError",
    "DecodeError",
    "InvalidJSON",
    "UnsupportedType",
    "InvalidTypeValue",
    "UnsupportedFormat",
    "InvalidKeywordValue",
    "SchemaNameError",
    "MalformedURI",
    "InvalidSchemaName",
    "ResolutionError",
    "UnsupportedSchemaType",
    "EmissionError",
    "NoProperties",
    "DuplicateFieldName",
    "FormatError",
]
