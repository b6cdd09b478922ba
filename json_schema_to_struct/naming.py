"""
Type name extraction from schema URIs.

Used for both a schema's own `$id` and the target of a `$ref`.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .errors import InvalidSchemaName, MalformedURI
from .utils import to_pascal_case

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


def name_from_uri(uri: str) -> str:
    """
    Return the type name for a schema URI.

    The last path segment is used, cut at its first dot to drop a file
    extension, and converted to PascalCase. Query and fragment are ignored.

    Examples:
        "https://example.com/a/b/name.json" -> "Name"
        "https://example.com/user_profile.schema.json?v=2" -> "UserProfile"

    Raises:
        MalformedURI: If the URI cannot be parsed
        InvalidSchemaName: If the URI has no path or the path yields no name
    """
    if _CONTROL_CHARACTERS.search(uri):
        raise MalformedURI(uri, "control character in URI")
    try:
        path = urlsplit(uri).path
    except ValueError as e:
        raise MalformedURI(uri, str(e)) from e

    if not path:
        raise InvalidSchemaName(uri)

    segment = path[path.rfind("/") + 1 :]
    segment = segment.split(".", 1)[0]

    name = to_pascal_case(segment)
    if not name:
        raise InvalidSchemaName(uri)
    return name
