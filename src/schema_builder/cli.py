"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click
from jsonschema.exceptions import SchemaError as JsonSchemaError
from jsonschema.exceptions import ValidationError

from schema_builder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from schema_builder.document_io import (
    DocumentError,
    load_instance_document,
    render_json_schema,
    write_json_schema,
)
from schema_builder.schema_loading import SchemaReferenceError, resolve_schema_reference
from schema_builder.validation import DEFAULT_FORMAT_CHECKER, assert_valid


class CliError(Exception):
    """Custom CLI error."""


_SCHEMA_OPTION_HELP = "Schema to use, given as 'package.module:attribute'"
_CONFIG_OPTION_HELP = "Optional YAML configuration file"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-builder")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Fluent JSON Schema builder utility."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="export")
@click.option("--schema", "schema_reference", required=True, help=_SCHEMA_OPTION_HELP)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=_CONFIG_OPTION_HELP,
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write the JSON Schema to; prints to stdout when omitted",
)
def export_schema(schema_reference: str, config_path: str | None, output_path: str | None) -> None:
    """Export the JSON Schema document of a schema definition."""
    try:
        configuration = _load_configuration(config_path)
        schema = resolve_schema_reference(schema_reference)
        if output_path is None:
            click.echo(render_json_schema(schema, configuration.export), nl=False)
            return
        written_path = write_json_schema(schema, output_path, configuration.export)
    except (ConfigurationError, SchemaReferenceError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written_path))


@cli.command(name="check")
@click.option("--schema", "schema_reference", required=True, help=_SCHEMA_OPTION_HELP)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="JSON or YAML document to validate",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=_CONFIG_OPTION_HELP,
)
def check_document(schema_reference: str, input_path: str, config_path: str | None) -> None:
    """Validate a document against a schema definition."""
    try:
        configuration = _load_configuration(config_path)
        schema = resolve_schema_reference(schema_reference)
        instance = load_instance_document(input_path)
        format_checker = (
            DEFAULT_FORMAT_CHECKER if configuration.validation.format_checking else None
        )
        assert_valid(instance, schema, format_checker=format_checker)
    except (ConfigurationError, SchemaReferenceError, DocumentError) as exc:
        raise CliError(str(exc)) from exc
    except ValidationError as exc:
        raise CliError(f"{exc.json_path}: {exc.message}") from exc
    except JsonSchemaError as exc:
        raise CliError(f"Invalid schema definition: {exc.message}") from exc
    click.echo("valid")


def _load_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    return load_configuration(config_path)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
