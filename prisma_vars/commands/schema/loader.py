"""Load introspection results from disk (.json/.yaml or .graphql SDL)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import build_schema, get_introspection_query, introspection_from_schema
from graphql.error import GraphQLError
from pydantic import ValidationError
import yaml

from prisma_vars.formats.introspection import IntrospectionSchema

SDL_SUFFIXES = frozenset({".graphql", ".gql", ".graphqls"})


class IntrospectionLoadError(Exception):
    """Raised when a schema file cannot be turned into an introspection result."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


def load_introspection(path: str | Path) -> IntrospectionSchema:
    """Load an introspection result from a file on disk.

    SDL files are built with graphql-core and introspected locally; any
    other file is parsed as JSON/YAML introspection output.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IntrospectionLoadError(f"Cannot read {path}: {e}", {"path": str(path)}) from e

    if path.suffix.lower() in SDL_SUFFIXES:
        return IntrospectionSchema.from_data(sdl_to_introspection(text))
    return load_introspection_text(
        text, source=str(path), is_yaml=path.suffix.lower() in (".yaml", ".yml")
    )


def load_introspection_text(
    text: str, source: str = "<string>", is_yaml: bool = False
) -> IntrospectionSchema:
    """Parse JSON (or YAML) introspection output."""
    try:
        data = yaml.safe_load(text) if is_yaml else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise IntrospectionLoadError(f"Invalid JSON/YAML in {source}: {e}", {"source": source}) from e

    if not isinstance(data, dict):
        raise IntrospectionLoadError(
            f"Expected an object at the top level of {source}", {"source": source}
        )

    try:
        return IntrospectionSchema.from_data(data)
    except ValidationError as e:
        raise IntrospectionLoadError(
            f"Not an introspection result: {source}",
            {"source": source, "errors": e.errors()},
        ) from e


def sdl_to_introspection(sdl: str) -> dict[str, Any]:
    """Introspect a schema given as SDL, returning the ``__schema`` payload."""
    try:
        schema = build_schema(sdl)
        result = introspection_from_schema(schema, descriptions=False)
    except GraphQLError as e:
        raise IntrospectionLoadError(f"Invalid GraphQL SDL: {e.message}") from e
    except (TypeError, ValueError) as e:
        raise IntrospectionLoadError(f"Invalid GraphQL schema: {e}") from e
    return dict(result)


def dump_introspection(data: dict[str, Any], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"data": data}, indent=2))


def introspection_query_text() -> str:
    """The standard introspection query, for fetching a schema elsewhere."""
    return get_introspection_query(descriptions=False)
