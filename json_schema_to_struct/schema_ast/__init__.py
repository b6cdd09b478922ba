"""
Schema AST: node definitions and the parser that builds them.
"""

from __future__ import annotations

from .nodes import FORMAT_TOKENS, TYPE_TOKENS, Schema, SchemaType, StringFormat
from .parser import SchemaParser, parse, parse_dict

__all__ = [
    "Schema",
    "SchemaType",
    "StringFormat",
    "TYPE_TOKENS",
    "FORMAT_TOKENS",
    "SchemaParser",
    "parse",
    "parse_dict",
]
