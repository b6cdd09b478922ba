"""
Struct emitter: renders a named schema as a Python dataclass.

Phase 2 of the pipeline. Output is deterministic for a given schema:
properties and imports are sorted before rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import jinja2

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import CodeGeneratorConfig
from .errors import DuplicateFieldName, InvalidSchemaName, MalformedURI, NoProperties, UnsupportedSchemaType
from .formatters import get_formatter
from .naming import name_from_uri
from .resolver import ResolvedType, resolve_type
from .schema_ast.nodes import Schema
from .utils import to_pascal_case

TEMPLATES_DIR = Path(__file__).parent / "templates" / "python"


@dataclass(frozen=True)
class FieldDef:
    name: str
    type_name: str


class StructEmitter:
    """Emits one dataclass declaration per named schema."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.prefix = self.jinja_env.get_template("prefix.py.jinja2")
        self.class_model = self.jinja_env.get_template("class.py.jinja2")

    def emit(self, schema: Schema) -> str:
        """
        Generate the source for a schema.

        Args:
            schema: Root node of a parsed schema document

        Returns:
            Formatted Python source. A schema without $id yields only the
            module header.

        Raises:
            NoProperties: If a named schema declares no properties
            SchemaNameError: If $id or a property's $ref yields no type name
            UnsupportedSchemaType: If a property cannot be resolved
            DuplicateFieldName: If two properties map to the same field name
            FormatError: If the formatter rejects the generated code
        """
        header = self.header()
        if not schema.id:
            return header

        body = self.structure(schema)
        code = f"{header}\n{body}" if header else body

        formatter_config = self.config.formatter
        if not formatter_config.enabled:
            return code
        return get_formatter(formatter_config.name).format(code, formatter_config)

    def header(self) -> str:
        """Render the module preamble."""
        return self.prefix.render(
            generation_comment=self._generation_comment(),
            use_future_annotations=self.config.use_future_annotations,
        )

    def structure(self, schema: Schema) -> str:
        """Render the import block and the class declaration, unformatted."""
        if not schema.properties:
            raise NoProperties(schema.id)

        class_name = name_from_uri(schema.id)

        fields = []
        imports = set()
        # field name -> property it came from
        seen: dict[str, str] = {}
        for name in sorted(schema.properties):
            prop = schema.properties[name]
            resolved = self._resolve_property(name, prop)

            if resolved.import_path:
                imports.add(resolved.import_path)

            field_name = to_pascal_case(name) if self.config.capitalize_field_names else name
            if field_name in seen:
                raise DuplicateFieldName(field_name, seen[field_name], name)
            seen[field_name] = name

            type_name = resolved.type_name
            if resolved.forward_ref and not self.config.use_future_annotations:
                type_name = f'"{type_name}"'
            fields.append(FieldDef(field_name, type_name))

        return self.class_model.render(
            imports=sorted(imports),
            class_name=class_name,
            fields=fields,
        )

    def _resolve_property(self, name: str, prop: Schema) -> ResolvedType:
        """Resolve one property, tagging errors with its name."""
        try:
            return resolve_type(prop.type, prop.format, prop.ref)
        except UnsupportedSchemaType as e:
            raise UnsupportedSchemaType(prop.type, prop.format, property_name=name) from e
        except MalformedURI as e:
            raise MalformedURI(e.uri, e.reason, property_name=name) from e
        except InvalidSchemaName as e:
            raise InvalidSchemaName(e.uri, property_name=name) from e

    def _generation_comment(self) -> str:
        """Generate a command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        from .json_schema_to_struct import json_schema_to_struct as click_command  # noqa

        command_line = reconstruct_command_line(click_command)
        return f"Generated by json_schema_to_struct v{__version__} : {command_line}"


def emit(schema: Schema, config: CodeGeneratorConfig | None = None) -> str:
    """Generate the source for a schema with a one-off emitter."""
    return StructEmitter(config).emit(schema)
