"""CLI command for the build stage: params file -> GraphQL variables."""

from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Any

import click
from pydantic import BaseModel, ValidationError
import yaml

from prisma_vars.commands.schema.loader import IntrospectionLoadError, load_introspection
from prisma_vars.formats.params import (
    CreateParams,
    DeleteParams,
    GetListParams,
    GetManyParams,
    GetManyReferenceParams,
    GetOneParams,
    UpdateParams,
)
from prisma_vars.helpers.console import console, print_diagnostic
from prisma_vars.variables import (
    Diagnostics,
    FetchType,
    IntrospectionIndex,
    Resource,
    ResourceNotFoundError,
    build_variables,
)

PARAMS_MODELS: dict[FetchType, type[BaseModel]] = {
    FetchType.GET_LIST: GetListParams,
    FetchType.GET_ONE: GetOneParams,
    FetchType.GET_MANY: GetManyParams,
    FetchType.GET_MANY_REFERENCE: GetManyReferenceParams,
    FetchType.CREATE: CreateParams,
    FetchType.UPDATE: UpdateParams,
    FetchType.DELETE: DeleteParams,
}


def load_params(path: str | Path, fetch_type: FetchType) -> dict[str, Any]:
    """Read a JSON/YAML params file and validate it for ``fetch_type``.

    Raises ValidationError or yaml.YAMLError.
    """
    raw: Any = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    model = PARAMS_MODELS[fetch_type].model_validate(raw)
    return model.model_dump(by_alias=True)


@click.command()
@click.option(
    "-s",
    "--schema",
    "schema_path",
    required=True,
    envvar="PRISMA_VARS_SCHEMA",
    type=click.Path(exists=True),
    help="Introspection result (.json/.yaml) or SDL (.graphql)",
)
@click.option("-r", "--resource", required=True, help="Resource (object type) name, e.g. Post")
@click.option(
    "-t",
    "--fetch-type",
    required=True,
    type=click.Choice([f.value for f in FetchType], case_sensitive=False),
    help="Admin-UI fetch type",
)
@click.option(
    "-p",
    "--params",
    "params_path",
    required=True,
    type=click.Path(exists=True),
    help="Params file (.json or .yaml)",
)
@click.option("-o", "--output", default=None, help="Write variables to this file instead of stdout")
@click.option(
    "--strict", is_flag=True, default=False, help="Exit with status 1 if any warning was emitted"
)
def build(
    schema_path: str,
    resource: str,
    fetch_type: str,
    params_path: str,
    output: str | None,
    strict: bool,
) -> None:
    """Build GraphQL variables for one admin-UI request."""
    kind = FetchType(fetch_type.upper())

    try:
        index = IntrospectionIndex(load_introspection(schema_path))
        target = Resource.from_index(index, resource)
    except IntrospectionLoadError as e:
        console.print(f"[red]Error loading schema: {e}[/red]")
        sys.exit(1)
    except ResourceNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        if e.available:
            console.print(f"  Available: {', '.join(e.available)}")
        sys.exit(1)

    try:
        params = load_params(params_path, kind)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid params for {kind.value}: {e}[/red]")
        sys.exit(1)

    diagnostics = Diagnostics(on_warning=print_diagnostic)
    variables = build_variables(index, target, kind, params, diagnostics)

    rendered = json.dumps(variables, indent=2, default=str)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered)
        console.print(f"[green]Variables written to {output}[/green]")
    else:
        console.print_json(rendered)

    if strict and diagnostics.entries:
        console.print(f"[red]{len(diagnostics.entries)} warning(s) in strict mode[/red]")
        sys.exit(1)
