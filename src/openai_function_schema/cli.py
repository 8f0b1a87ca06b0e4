"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

import click

from openai_function_schema.configuration import (
    DEFAULT_MANIFEST_FILENAME,
    ConfigurationError,
    load_manifest,
    write_placeholder_manifest,
)
from openai_function_schema.schema_generation import (
    Schema,
    SchemaSerializationError,
    TypeReferenceError,
    resolve_type_reference,
)
from openai_function_schema.tool_export import (
    ToolDefinitionError,
    build_manifest_tools,
    render_tool_definitions,
    write_tool_definitions,
)


class CliError(Exception):
    """Custom CLI error."""


_OUTPUT_OPTION = click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Write the result to this file instead of stdout",
)
_INDENT_OPTION = click.option(
    "--indent",
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="JSON indentation of the written schema",
)
_APP_DIR_OPTION = click.option(
    "--app-dir",
    "app_dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory prepended to the import path before resolving type references",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openai-function-schema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Restrict JSON Schemas to the subset accepted by OpenAI function calling."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="normalize")
@click.argument("schema_file", type=click.File("rb"))
@_OUTPUT_OPTION
@_INDENT_OPTION
def normalize(schema_file: BinaryIO, output_path: str | None, indent: int) -> None:
    """Normalize a JSON Schema file (use '-' to read stdin)."""
    try:
        schema = Schema.from_text(schema_file.read())
    except SchemaSerializationError as exc:
        raise CliError(str(exc)) from exc
    _emit(schema.to_json(indent=indent), output_path)


@cli.command(name="generate")
@click.argument("target")
@_OUTPUT_OPTION
@_INDENT_OPTION
@_APP_DIR_OPTION
def generate(target: str, output_path: str | None, indent: int, app_dir: str) -> None:
    """Generate a normalized schema for TARGET, given as 'package.module:Name'."""
    try:
        with _import_path(app_dir):
            schema = Schema.from_type(resolve_type_reference(target))
    except (TypeReferenceError, SchemaSerializationError) as exc:
        raise CliError(str(exc)) from exc
    _emit(schema.to_json(indent=indent), output_path)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_MANIFEST_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML tool manifest template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML tool manifest with guidance comments."""
    try:
        resolved_output = write_placeholder_manifest(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="export-tools")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON tool manifest",
)
@_OUTPUT_OPTION
@_APP_DIR_OPTION
def export_tools(config_path: str, output_path: str | None, app_dir: str) -> None:
    """Export OpenAI function tool definitions for every tool in the manifest."""
    try:
        manifest = load_manifest(config_path)
        with _import_path(app_dir):
            tools = build_manifest_tools(manifest)
        if output_path is None:
            click.echo(render_tool_definitions(tools, manifest.output))
            return
        resolved_output = write_tool_definitions(tools, output_path, manifest.output)
    except (
        ConfigurationError,
        SchemaSerializationError,
        TypeReferenceError,
        ToolDefinitionError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@contextmanager
def _import_path(app_dir: str) -> Iterator[None]:
    """Prepend ``app_dir`` to ``sys.path`` while type references are resolved."""
    resolved = str(Path(app_dir).resolve())
    if resolved in sys.path:
        yield
        return
    sys.path.insert(0, resolved)
    try:
        yield
    finally:
        sys.path.remove(resolved)


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
