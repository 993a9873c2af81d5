"""Fixed-shape ``where`` variables that need no introspection."""

from __future__ import annotations

from prisma_vars.variables.types import Params


def build_get_one_variables(params: Params) -> Params:
    return {"where": {"id": params["id"]}}


def build_get_many_variables(params: Params) -> Params:
    return {"where": {"id_in": params["ids"]}}


def build_get_many_reference_variables(params: Params) -> Params:
    """``target`` is a dotted path such as ``author.id``; only the relation is kept."""
    relation = params["target"].split(".")[0]
    return {"where": {relation: {"id": params["id"]}}}


def build_delete_variables(params: Params) -> Params:
    return {"where": {"id": params["id"]}}
