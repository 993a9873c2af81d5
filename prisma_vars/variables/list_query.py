"""Variables for list queries: ``where``, ``orderBy``, ``skip`` and ``first``."""

from __future__ import annotations

import re
from typing import Any, cast

from prisma_vars.variables.index import IntrospectionIndex
from prisma_vars.variables.types import Params, Resource

_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def build_get_list_variables(
    index: IntrospectionIndex,
    resource: Resource,
    params: Params,
) -> Params:
    """Map admin-UI filter/sort/pagination params to Prisma list arguments."""
    where: Params = {}
    for key, value in params["filter"].items():
        where.update(_build_filter(index, resource, key, value))

    pagination = params["pagination"]
    sort = params["sort"]
    return {
        "skip": (pagination["page"] - 1) * pagination["perPage"],
        "first": pagination["perPage"],
        "orderBy": f"{sort['field']}_{sort['order']}",
        "where": where,
    }


def _build_filter(
    index: IntrospectionIndex, resource: Resource, key: str, value: Any
) -> Params:
    """Filter entries for one key; the first matching rule wins."""
    where_input = resource.where_input_name

    if key == "ids":
        return {"id_in": value}

    # The schema declares a native list filter for this key (e.g. `id_in`)
    if isinstance(value, list) and index.field_exists(where_input, key):
        return {key: value}

    # To-many relation: {tags: {id: [...]}} -> {tags_some: {id_in: [...]}}
    if isinstance(value, dict) and index.field_exists(where_input, f"{key}_some"):
        sub_filter = cast(Params, value)
        return {f"{key}_some": {f"{k}_in": v for k, v in sub_filter.items()}}

    parts = key.split(".")
    if len(parts) > 1:
        relation, sub = parts[0], parts[1]
        if sub == "id":
            if index.field_exists(where_input, f"{relation}_some"):
                return {f"{relation}_some": {"id": value}}
            return {relation: {"id": value}}

        field_type = index.object_field(resource.name, relation)
        if field_type is not None:
            type_name = field_type.name
            if type_name == "Int":
                return {key: _parse_int(value)}
            if type_name == "Float":
                return {key: _parse_float(value)}

    return {key: value}


def _parse_int(value: Any) -> Any:
    """Leading-integer parse; unparseable values pass through unchanged."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return int(value)
    match = _INT_PREFIX.match(str(value))
    return int(match.group(0)) if match else value


def _parse_float(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    return float(match.group(0)) if match else value
