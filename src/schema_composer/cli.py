"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from schema_composer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from schema_composer.document_conversion import (
    ConversionError,
    ConversionRequest,
    DocumentKind,
    convert_document,
    load_document,
)
from schema_composer.serialization import OutputFormat


class CliError(Exception):
    """Custom CLI error."""


_KIND_CHOICE = click.Choice([kind.value for kind in DocumentKind])
_FORMAT_CHOICE = click.Choice([output_format.value for output_format in OutputFormat])


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-composer")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """OpenAPI 3.1 schema composition utility."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


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
    """Generate a YAML configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML schema document",
)
@click.option(
    "--kind",
    default=DocumentKind.SCHEMA.value,
    show_default=True,
    type=_KIND_CHOICE,
    help="Root object of the document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON configuration file",
)
@click.option(
    "--strict-references",
    is_flag=True,
    default=False,
    help="Reject reference objects with keys next to $ref.",
)
def validate(input_path: str, kind: str, config_path: str | None, strict_references: bool) -> None:
    """Check that a document decodes into a valid schema tree."""
    try:
        load_document(
            ConversionRequest(
                input_path=input_path,
                kind=DocumentKind(kind),
                config_path=config_path,
                strict_references=strict_references,
            )
        )
    except ConversionError as exc:
        raise CliError(str(exc)) from exc
    click.echo("ok")


@cli.command(name="convert")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML schema document",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to write the converted document; stdout when omitted",
)
@click.option(
    "--kind",
    default=DocumentKind.SCHEMA.value,
    show_default=True,
    type=_KIND_CHOICE,
    help="Root object of the document",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=_FORMAT_CHOICE,
    help="Output format; overrides the configuration file",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON configuration file",
)
def convert(
    input_path: str,
    output_path: str | None,
    kind: str,
    output_format: str | None,
    config_path: str | None,
) -> None:
    """Decode a document and write it back in normalized JSON or YAML."""
    try:
        rendered = convert_document(
            ConversionRequest(
                input_path=input_path,
                kind=DocumentKind(kind),
                config_path=config_path,
                output_format=OutputFormat(output_format) if output_format else None,
            )
        )
    except ConversionError as exc:
        raise CliError(str(exc)) from exc

    if output_path is None:
        click.echo(rendered, nl=False)
        return
    try:
        Path(output_path).write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


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
