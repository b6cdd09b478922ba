import json
from pathlib import Path

import click

from .config import CodeGeneratorConfig, OutputMode
from .errors import SchemaToStructError
from .generator import PipelineGenerator
from .writer import AtomicWriter, validate_python


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--formatter",
    "-f",
    default=None,
    type=click.Choice(["black", "ruff", "none"]),
    help="Formatter applied to the generated code (overrides config file if set)",
)
@click.option(
    "--capitalize-fields",
    is_flag=True,
    default=False,
    help="Emit field names in PascalCase instead of the raw property names",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite OUTPUT if it already exists")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_struct(config, formatter, capitalize_fields, force, path, output):
    """Generate a Python dataclass from the JSON Schema at PATH.

    The result is written to OUTPUT, or to stdout when OUTPUT is omitted.
    """
    if config is not None:
        with open(config) as f:
            try:
                config = CodeGeneratorConfig.from_dict(json.load(f))
            except (ValueError, TypeError, AttributeError) as e:
                # Malformed JSON, a non-object document, unknown formatter/mode values or keys
                raise click.ClickException(f"Invalid config {Path(config).name}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if formatter == "none":
        config.formatter.enabled = False
    elif formatter is not None:
        config.formatter.enabled = True
        config.formatter.name = formatter
    if capitalize_fields:
        config.capitalize_field_names = True
    if force:
        config.output.mode = OutputMode.FORCE

    with open(path, "rb") as f:
        data = f.read()

    try:
        out = PipelineGenerator(data, config).generate()
    except SchemaToStructError as e:
        raise click.ClickException(f"{Path(path).name}: {e}") from e

    if output is None:
        click.echo(out, nl=False)
        return

    write_output(Path(output), out, config)
    click.echo(f"Wrote {output}", err=True)


def write_output(path: Path, content: str, config: CodeGeneratorConfig) -> None:
    """Write generated code according to the output configuration."""
    output_config = config.output
    validate = output_config.validate_before_write

    try:
        if not output_config.atomic_write:
            if output_config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
            if validate:
                validate_python(content)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        elif output_config.mode == OutputMode.FORCE:
            AtomicWriter().write(path, content, validate)
        else:
            AtomicWriter().write_if_not_exists(path, content, validate)
    except (FileExistsError, SchemaToStructError) as e:
        raise click.ClickException(str(e)) from e
