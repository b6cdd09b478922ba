import pytest

from json_schema_to_struct.errors import InvalidSchemaName, UnsupportedSchemaType
from json_schema_to_struct.resolver import ResolvedType, resolve_type
from json_schema_to_struct.schema_ast import SchemaType, StringFormat


class TestStringFormats:
    """Formats refine the string type"""

    @pytest.mark.parametrize(
        "string_format,expected",
        [
            (StringFormat.DATE_TIME, ResolvedType("datetime.datetime", "datetime")),
            (StringFormat.DATE, ResolvedType("datetime.date", "datetime")),
            (StringFormat.TIME, ResolvedType("datetime.time", "datetime")),
            (StringFormat.DURATION, ResolvedType("datetime.timedelta", "datetime")),
            (StringFormat.IPV4, ResolvedType("ipaddress.IPv4Address", "ipaddress")),
            (StringFormat.IPV6, ResolvedType("ipaddress.IPv6Address", "ipaddress")),
            (StringFormat.REGEX, ResolvedType("re.Pattern", "re")),
            (StringFormat.UUID, ResolvedType("uuid.UUID", "uuid")),
        ],
    )
    def test_formats_with_imports(self, string_format, expected):
        assert resolve_type(SchemaType.STRING, string_format) == expected

    @pytest.mark.parametrize(
        "string_format",
        [
            None,
            StringFormat.EMAIL,
            StringFormat.HOSTNAME,
            StringFormat.URI,
            StringFormat.JSON_POINTER,
        ],
    )
    def test_plain_strings(self, string_format):
        assert resolve_type(SchemaType.STRING, string_format) == ResolvedType("str", "")

    def test_string_bit_wins_in_unions(self):
        resolved = resolve_type(SchemaType.STRING | SchemaType.NULL, StringFormat.UUID)
        assert resolved == ResolvedType("uuid.UUID", "uuid")

    def test_string_ignores_ref(self):
        assert resolve_type(SchemaType.STRING, None, "https://example.com/inner.json").type_name == "str"


class TestPrimitives:
    @pytest.mark.parametrize(
        "schema_type,type_name",
        [
            (SchemaType.INTEGER, "int"),
            (SchemaType.NUMBER, "float"),
            (SchemaType.BOOLEAN, "bool"),
            (SchemaType.ARRAY, "list"),
            (SchemaType.NULL, "object"),
        ],
    )
    def test_primitive_types(self, schema_type, type_name):
        assert resolve_type(schema_type) == ResolvedType(type_name, "")

    def test_format_is_ignored_for_non_strings(self):
        assert resolve_type(SchemaType.INTEGER, StringFormat.UUID) == ResolvedType("int", "")


class TestReferences:
    def test_ref_without_type(self):
        resolved = resolve_type(SchemaType(0), None, "https://example.com/inner.json")
        assert resolved == ResolvedType("Inner | None", "", forward_ref=True)

    def test_ref_on_object(self):
        resolved = resolve_type(SchemaType.OBJECT, None, "https://example.com/shapes/line_item.json")
        assert resolved.type_name == "LineItem | None"

    def test_ref_on_mixed_union(self):
        resolved = resolve_type(SchemaType.INTEGER | SchemaType.NULL, None, "https://example.com/inner.json")
        assert resolved.type_name == "Inner | None"

    def test_bad_ref(self):
        with pytest.raises(InvalidSchemaName):
            resolve_type(SchemaType(0), None, "https://example.com")


class TestUnsupported:
    @pytest.mark.parametrize(
        "schema_type",
        [
            SchemaType(0),
            SchemaType.OBJECT,
            SchemaType.INTEGER | SchemaType.NULL,
            SchemaType.NUMBER | SchemaType.INTEGER,
        ],
    )
    def test_no_rule_matches(self, schema_type):
        with pytest.raises(UnsupportedSchemaType) as exc_info:
            resolve_type(schema_type)
        assert exc_info.value.schema_type == schema_type
        assert exc_info.value.property_name is None

    def test_message_names_type_and_format(self):
        with pytest.raises(UnsupportedSchemaType, match=r"object\|array with format 'email'"):
            resolve_type(SchemaType.OBJECT | SchemaType.ARRAY, StringFormat.EMAIL)
