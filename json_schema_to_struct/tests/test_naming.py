import pytest

from json_schema_to_struct.errors import InvalidSchemaName, MalformedURI, SchemaNameError
from json_schema_to_struct.naming import name_from_uri
from json_schema_to_struct.utils import to_pascal_case


class TestNameFromURI:
    """Test type name extraction from $id and $ref URIs"""

    @pytest.mark.parametrize(
        "uri,expected",
        [
            ("https://example.com/name.json", "Name"),
            ("https://example.com/a/b/c/test.json", "Test"),
            ("https://example.com/a/b/c/query.json?a=1", "Query"),
            ("https://example.com/a/b/c/anchor.json#anchor1", "Anchor"),
            ("https://example.com/user_profile.schema.json", "UserProfile"),
            ("https://example.com/line-item.json", "LineItem"),
            ("https://example.com/orderLine.json", "OrderLine"),
            ("https://example.com/schemas/address", "Address"),
            ("/relative/path/inner.json", "Inner"),
            ("inner.json", "Inner"),
            ("urn:example:vehicle.json", "ExampleVehicle"),
            ("https://example.com/café.json", "Café"),
            ("https://example.com/données_client.json", "DonnéesClient"),
            ("https://example.com/日本.json", "日本"),
        ],
    )
    def test_names(self, uri, expected):
        assert name_from_uri(uri) == expected

    def test_query_and_fragment_are_ignored(self):
        names = {
            name_from_uri("https://example.com/a/b/name.json"),
            name_from_uri("https://example.com/a/b/name.json?x=1"),
            name_from_uri("https://example.com/a/b/name.json#frag"),
        }
        assert names == {"Name"}

    @pytest.mark.parametrize(
        "uri",
        [
            "https://example.com",
            "https://example.com?name.json",
            "#/definitions/name",
            "",
            "https://example.com/dir/",
            "https://example.com/.json",
        ],
    )
    def test_invalid_schema_name(self, uri):
        with pytest.raises(InvalidSchemaName):
            name_from_uri(uri)

    @pytest.mark.parametrize(
        "uri",
        [
            "https://[::1/name.json",
            "https://example.com/na\x00me.json",
            "https://example.com/name.json\n",
        ],
    )
    def test_malformed_uri(self, uri):
        with pytest.raises(MalformedURI):
            name_from_uri(uri)

    def test_errors_share_a_base(self):
        assert issubclass(MalformedURI, SchemaNameError)
        assert issubclass(InvalidSchemaName, SchemaNameError)


class TestPascalCase:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("model", "Model"),
            ("first_name", "FirstName"),
            ("first-name", "FirstName"),
            ("actionTemplate", "ActionTemplate"),
            ("ID", "ID"),
            ("first 3 rows", "First3Rows"),
            ("café", "Café"),
            ("élan_vital", "ÉlanVital"),
            ("straße", "Straße"),
            ("", ""),
            ("__", ""),
        ],
    )
    def test_to_pascal_case(self, text, expected):
        assert to_pascal_case(text) == expected
