"""CLI entry point for flat-schema.

Invoked as::

    flat-schema [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m flatschema.cli.main

Commands
--------
describe    Show the schema of a record type
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, cast

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from flatschema.record import SchemaMeta

console = Console()
err_console = Console(stderr=True)


def _resolve_or_exit(target: str) -> "SchemaMeta":
    """Resolve a record type reference, exiting on error."""
    from flatschema.errors import RecordTypeNotFoundError
    from flatschema.loader import resolve_record_type

    try:
        return resolve_record_type(target)
    except RecordTypeNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _definition_cell(definition: object) -> str:
    if isinstance(definition, dict):
        return ", ".join(f"{k}={v!r}" for k, v in definition.items())
    return str(definition)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="flat-schema")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Inspect schema metadata of fixed-width record types."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from flatschema import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]flat-schema[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# describe command
# ---------------------------------------------------------------------------


@cli.command(name="describe")
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    show_default=True,
    help="Output format",
)
def describe_command(target: str, output_format: str) -> None:
    """Show width, pack format, fields and layouts of a record type.

    TARGET is a reference of the form 'package.module:ClassName'.
    """
    from flatschema.serializer import SchemaSerializer

    record_type = _resolve_or_exit(target)
    serializer = SchemaSerializer()

    if output_format == "json":
        click.echo(serializer.to_json(record_type))
        return
    if output_format == "yaml":
        console.print(Syntax(serializer.to_yaml(record_type), "yaml"))
        return

    data = serializer.to_dict(record_type)
    console.print(f"[bold]{escape(str(data['name']))}[/bold]")
    console.print(f"  width:       {data['width']}")
    console.print(f"  pack_format: {escape(repr(data['pack_format']))}")

    for title, key in (("Fields", "fields"), ("Layouts", "layouts")):
        definitions = cast(list[object], data[key])
        if not definitions:
            console.print(f"  [dim]No {key} registered.[/dim]")
            continue
        table = Table(title=title)
        table.add_column("#", justify="right")
        table.add_column("Definition")
        for position, definition in enumerate(definitions):
            table.add_row(str(position), escape(_definition_cell(definition)))
        console.print(table)


if __name__ == "__main__":
    cli()
