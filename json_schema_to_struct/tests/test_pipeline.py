"""
End-to-end tests: schema document in, formatted dataclass out.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_struct import CodeGeneratorConfig, PipelineGenerator
from json_schema_to_struct.errors import DecodeError, NoProperties

TEST_DATA = Path(__file__).parent / "test_data"


def _generate(data) -> str:
    return PipelineGenerator(data, CodeGeneratorConfig(add_generation_comment=False)).generate()


@pytest.mark.parametrize(
    "schema_file,golden",
    [
        ("model.schema.json", "model_struct"),
        ("event.schema.json", "event_struct"),
    ],
)
def test_schema_files(schema_file, golden):
    data = (TEST_DATA / "schemas" / schema_file).read_bytes()
    expected = (TEST_DATA / "golden" / f"{golden}.py.golden").read_text(encoding="utf-8")
    assert _generate(data) == expected


def test_model_example():
    document = json.dumps(
        {
            "$id": "https://example.com/model.json",
            "type": "object",
            "properties": {"Name": {"type": "string"}, "Age": {"type": "integer"}},
        }
    )
    assert _generate(document) == (
        "from __future__ import annotations\n"
        "\n"
        "from dataclasses import dataclass\n"
        "\n"
        "\n"
        "@dataclass\n"
        "class Model:\n"
        "    Age: int\n"
        "    Name: str\n"
    )


def test_anonymous_schema():
    assert _generate('{"type": "object", "properties": {"a": {"type": "string"}}}') == (
        "from __future__ import annotations\n"
    )


def test_named_schema_without_properties():
    with pytest.raises(NoProperties):
        _generate('{"$id": "https://example.com/empty.json", "type": "object"}')


def test_decode_errors_propagate():
    with pytest.raises(DecodeError):
        _generate('{"$id": "https://example.com/x.json", "properties": {"a": {"format": "nope"}}}')
