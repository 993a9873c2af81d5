"""Entry point: pick the variable builder for a fetch type."""

from __future__ import annotations

from prisma_vars.variables.diagnostics import Diagnostics
from prisma_vars.variables.index import IntrospectionIndex
from prisma_vars.variables.list_query import build_get_list_variables
from prisma_vars.variables.simple import (
    build_delete_variables,
    build_get_many_reference_variables,
    build_get_many_variables,
    build_get_one_variables,
)
from prisma_vars.variables.traverse import build_create_variables, build_update_variables
from prisma_vars.variables.types import FetchType, Params, Resource


def build_variables(
    index: IntrospectionIndex,
    resource: Resource,
    fetch_type: FetchType | str,
    params: Params,
    diagnostics: Diagnostics | None = None,
) -> Params:
    """Build the GraphQL variables for one admin-UI request.

    Raises ValueError for an unknown fetch type.
    """
    fetch_type = FetchType(fetch_type)

    if fetch_type is FetchType.GET_LIST:
        return build_get_list_variables(index, resource, params)
    if fetch_type is FetchType.GET_ONE:
        return build_get_one_variables(params)
    if fetch_type is FetchType.GET_MANY:
        return build_get_many_variables(params)
    if fetch_type is FetchType.GET_MANY_REFERENCE:
        return build_get_many_reference_variables(params)
    if fetch_type is FetchType.CREATE:
        return build_create_variables(index, resource, params, diagnostics)
    if fetch_type is FetchType.UPDATE:
        return build_update_variables(index, resource, params, diagnostics)
    return build_delete_variables(params)
