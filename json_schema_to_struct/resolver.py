"""
Maps a property's schema type to a Python type annotation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .errors import UnsupportedSchemaType
from .naming import name_from_uri
from .schema_ast.nodes import SchemaType, StringFormat


@dataclass(frozen=True)
class ResolvedType:
    """A type annotation and the module it needs, if any."""

    type_name: str
    import_path: str = ""

    # Names another generated class, which may not exist when the annotation is evaluated
    forward_ref: bool = False


_STR = ResolvedType("str")

# Types refined by the `format` keyword when the string type is declared
STRING_FORMAT_TYPES = MappingProxyType(
    {
        StringFormat.DATE_TIME: ResolvedType("datetime.datetime", "datetime"),
        StringFormat.DATE: ResolvedType("datetime.date", "datetime"),
        StringFormat.TIME: ResolvedType("datetime.time", "datetime"),
        StringFormat.DURATION: ResolvedType("datetime.timedelta", "datetime"),
        StringFormat.IPV4: ResolvedType("ipaddress.IPv4Address", "ipaddress"),
        StringFormat.IPV6: ResolvedType("ipaddress.IPv6Address", "ipaddress"),
        StringFormat.REGEX: ResolvedType("re.Pattern", "re"),
        StringFormat.UUID: ResolvedType("uuid.UUID", "uuid"),
    }
)

# Objects have no entry: they are only reachable through $ref
PRIMITIVE_TYPES = MappingProxyType(
    {
        SchemaType.INTEGER: ResolvedType("int"),
        SchemaType.NUMBER: ResolvedType("float"),
        SchemaType.BOOLEAN: ResolvedType("bool"),
        SchemaType.ARRAY: ResolvedType("list"),
        SchemaType.NULL: ResolvedType("object"),
    }
)


def resolve_type(schema_type: SchemaType, string_format: StringFormat | None = None, ref: str = "") -> ResolvedType:
    """
    Resolve a property to a Python type.

    Args:
        schema_type: Declared type flags of the property
        string_format: Declared format, if any
        ref: The property's $ref, empty if none

    Returns:
        The resolved type and its import path

    Raises:
        UnsupportedSchemaType: If no rule matches
        SchemaNameError: If the $ref cannot be turned into a type name
    """
    if SchemaType.STRING in schema_type:
        return STRING_FORMAT_TYPES.get(string_format, _STR)

    primitive = PRIMITIVE_TYPES.get(schema_type)
    if primitive is not None:
        return primitive

    if ref:
        # A referenced schema is another generated class, always optional
        return ResolvedType(f"{name_from_uri(ref)} | None", forward_ref=True)

    raise UnsupportedSchemaType(schema_type, string_format)
