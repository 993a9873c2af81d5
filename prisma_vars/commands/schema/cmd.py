"""CLI commands for schema files: inspect, convert SDL, print the introspection query."""

from __future__ import annotations

from pathlib import Path
import sys

import click
from rich.table import Table

from prisma_vars.commands.schema.loader import (
    IntrospectionLoadError,
    dump_introspection,
    introspection_query_text,
    load_introspection,
    sdl_to_introspection,
)
from prisma_vars.formats.introspection import TypeDef, TypeRef
from prisma_vars.helpers.console import console, truncate
from prisma_vars.variables.index import IntrospectionIndex


@click.group()
def schema() -> None:
    """Schema tools: inspect introspection results, convert SDL."""


@schema.command()
@click.option(
    "-s",
    "--schema",
    "schema_path",
    required=True,
    envvar="PRISMA_VARS_SCHEMA",
    type=click.Path(exists=True),
    help="Introspection result (.json/.yaml) or SDL (.graphql)",
)
@click.option("--type", "type_name", default=None, help="Show the fields of one type")
def inspect(schema_path: str, type_name: str | None) -> None:
    """Inspect the types of a schema."""
    try:
        index = IntrospectionIndex(load_introspection(schema_path))
    except IntrospectionLoadError as e:
        console.print(f"[red]Error loading schema: {e}[/red]")
        sys.exit(1)

    if type_name:
        type_def = index.type_by_name(type_name)
        if type_def is None:
            console.print(f"[red]Type {type_name} not found[/red]")
            sys.exit(1)
        _inspect_type(index, type_def)
    else:
        _inspect_summary(index)


def _inspect_summary(index: IntrospectionIndex) -> None:
    table = Table(title=f"Types ({len(index)})")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Fields", justify="right")
    for type_def in sorted(index.schema.types, key=lambda t: t.name):
        if type_def.name.startswith("__"):
            continue
        fields = type_def.input_fields if type_def.input_fields is not None else type_def.fields
        table.add_row(type_def.name, type_def.kind, str(len(fields or [])))
    console.print(table)


def _inspect_type(index: IntrospectionIndex, type_def: TypeDef) -> None:
    table = Table(title=f"{type_def.name} ({type_def.kind})")
    table.add_column("Field", style="cyan")
    table.add_column("Type")
    table.add_column("Final type")
    table.add_column("Kind")

    refs: list[tuple[str, TypeRef]] = [(f.name, f.type) for f in type_def.input_fields or []]
    refs += [(f.name, f.type) for f in type_def.fields or []]
    for name, ref in refs:
        final = index.final_type(ref)
        table.add_row(name, truncate(_print_type_ref(ref), 60), final.name or "?", final.kind)
    console.print(table)


def _print_type_ref(ref: TypeRef) -> str:
    """Render a type reference in SDL notation, e.g. ``[Tag!]!``."""
    if ref.kind == "NON_NULL" and ref.of_type is not None:
        return f"{_print_type_ref(ref.of_type)}!"
    if ref.kind == "LIST" and ref.of_type is not None:
        return f"[{_print_type_ref(ref.of_type)}]"
    return ref.name or "?"


@schema.command()
@click.argument("sdl_path", type=click.Path(exists=True))
@click.option("-o", "--output", required=True, help="Output path for the introspection (.json)")
def convert(sdl_path: str, output: str) -> None:
    """Convert an SDL schema into an introspection result."""
    try:
        data = sdl_to_introspection(Path(sdl_path).read_text(encoding="utf-8"))
    except IntrospectionLoadError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    dump_introspection(data, output)
    type_count = len(data["__schema"]["types"])
    console.print(f"[green]Introspection ({type_count} types) written to {output}[/green]")


@schema.command()
def query() -> None:
    """Print the introspection query used to fetch a schema."""
    click.echo(introspection_query_text())
