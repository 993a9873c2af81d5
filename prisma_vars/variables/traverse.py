"""Recursive builder for create/update mutation variables.

Walks the input data and the introspected input-type graph in parallel.
Every key of the data object is classified against the current input type:

1. ``id``: becomes ``where: {id}`` of the current level
2. unknown to the schema: skipped with a ``missing_field`` diagnostic
3. SCALAR / ENUM: copied verbatim under ``data``
4. list (relation list): reconnect, or diff against the previous snapshot
   into create/connect/update/disconnect buckets
5. mapping (single relation): connect, update, create, or removal
6. anything else: ignored

Nested levels recurse with their own ``VariablesBuilder`` against the
operation's sub-type (``create`` type, ``data`` of the ``update`` wrapper,
...), so the shape of every nested value is driven by the schema.
"""

from __future__ import annotations

from typing import Any, cast

from prisma_vars.formats.introspection import LEAF_KINDS, TypeRef
from prisma_vars.variables.diagnostics import Diagnostics
from prisma_vars.variables.index import IntrospectionIndex
from prisma_vars.variables.mutation_input import (
    MutationCapabilities,
    decide_object_mutation,
    find_mutation_input_type,
)
from prisma_vars.variables.types import (
    CONNECT,
    CREATE,
    SET,
    UPDATE,
    ObjectMutation,
    Params,
    Resource,
    TraversalParams,
    VariablesBuilder,
)


def build_create_variables(
    index: IntrospectionIndex,
    resource: Resource,
    params: Params,
    diagnostics: Diagnostics | None = None,
) -> Params:
    """Variables for ``create<Resource>(data: <Resource>CreateInput)``."""
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    builder = traverse_object(
        index,
        resource.create_input_name,
        TraversalParams(data=params["data"]),
        diagnostics,
    )
    return builder.to_variables()


def build_update_variables(
    index: IntrospectionIndex,
    resource: Resource,
    params: Params,
    diagnostics: Diagnostics | None = None,
) -> Params:
    """Variables for ``update<Resource>(where, data: <Resource>UpdateInput)``.

    ``previousData`` is only used to diff relation lists and to detect
    cleared single relations.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    builder = traverse_object(
        index,
        resource.update_input_name,
        TraversalParams(data=params["data"], previous_data=params.get("previousData") or {}),
        diagnostics,
    )
    return builder.to_variables()


def traverse_object(
    index: IntrospectionIndex,
    type_name: str,
    params: TraversalParams,
    diagnostics: Diagnostics,
) -> VariablesBuilder:
    """Fold ``traverse`` over every key of ``params.data``."""
    builder = VariablesBuilder()
    for key in params.data:
        traverse(index, type_name, params, key, builder, diagnostics)
    return builder


def traverse(
    index: IntrospectionIndex,
    parent_type_name: str,
    params: TraversalParams,
    key: str,
    builder: VariablesBuilder,
    diagnostics: Diagnostics,
) -> VariablesBuilder:
    """Classify ``params.data[key]`` against ``parent_type_name`` into ``builder``."""
    value = params.data[key]

    if key == "id":
        # A falsy id (e.g. on create) means no where filter
        if value:
            builder.set_where_id(value)
        return builder

    field_type = index.input_field(parent_type_name, key)
    if field_type is None:
        diagnostics.warn(
            "missing_field",
            f"Field ({key}) not found on type {parent_type_name}",
            type_name=parent_type_name,
            field=key,
        )
        return builder

    if field_type.kind in LEAF_KINDS:
        builder.set_data(key, value)
        return builder

    previous = params.previous_data.get(key)

    if isinstance(value, list):
        operations = _build_list_mutation(
            index,
            parent_type_name,
            key,
            field_type,
            cast(list[Any], value),
            cast(list[Any], previous) if isinstance(previous, list) else [],
            diagnostics,
        )
        if operations:
            builder.set_data(key, operations)
        return builder

    if isinstance(value, dict) or (value is None and isinstance(previous, dict)):
        operations = _build_object_mutation(
            index,
            parent_type_name,
            key,
            cast(Params, value or {}),
            cast(Params, previous) if isinstance(previous, dict) else {},
            diagnostics,
        )
        if operations:
            builder.set_data(key, operations)

    return builder


# -- Relation lists -----------------------------------------------------------


def _record_id(item: Any) -> Any:
    if isinstance(item, dict):
        return cast(Params, item).get("id")
    return None


def _is_id_only(item: Any) -> bool:
    return isinstance(item, dict) and list(cast(Params, item)) == ["id"]


def _build_list_mutation(
    index: IntrospectionIndex,
    parent_type_name: str,
    key: str,
    field_type: TypeRef,
    current: list[Any],
    previous: list[Any],
    diagnostics: Diagnostics,
) -> Params | None:
    capabilities = MutationCapabilities.probe(index, parent_type_name, key)

    # Scalar list wrapper, e.g. PostCreatetagsInput { set: [String!] }
    if current and not any(isinstance(item, dict) for item in current):
        return {SET: list(current)} if capabilities.set else None

    current_ids = [_record_id(item) for item in current if _record_id(item)]
    previous_ids = [_record_id(item) for item in previous if _record_id(item)]
    to_remove = [{"id": pid} for pid in previous_ids if pid not in current_ids]

    operations: Params = {}

    if current and all(_is_id_only(item) for item in current):
        # Pure reconnect: `set` replaces membership, `connect` needs removals
        if capabilities.set:
            return {SET: list(current)}
        operations[CONNECT] = list(current)
        _add_removals(operations, to_remove, capabilities, field_type, diagnostics)
        return operations

    if not current and capabilities.set:
        return {SET: []}

    records = [item for item in current if isinstance(item, dict)]
    to_create = [item for item in records if not _record_id(item)]
    to_connect = [
        item for item in records if _is_id_only(item) and item["id"] not in previous_ids
    ]
    # Id-only members already in previous are unchanged: no bucket
    to_update = [
        item for item in records if _record_id(item) and not _is_id_only(item)
    ]

    if field_type.name is not None:
        wrapper_name = field_type.name

        create_type = index.input_field(wrapper_name, CREATE)
        if create_type is not None and create_type.name is not None:
            operations[CREATE] = [
                traverse_object(
                    index, create_type.name, TraversalParams(data=item), diagnostics
                ).data_or_empty()
                for item in to_create
            ]

        if capabilities.connect:
            operations[CONNECT] = to_connect

        update_type = index.input_field(wrapper_name, UPDATE)
        data_type = (
            index.input_field(update_type.name, "data")
            if update_type is not None and update_type.name is not None
            else None
        )
        if data_type is not None and data_type.name is not None:
            operations[UPDATE] = [
                _build_list_update(index, data_type.name, item, previous, diagnostics)
                for item in to_update
            ]

    _add_removals(operations, to_remove, capabilities, field_type, diagnostics)

    non_empty = {op: items for op, items in operations.items() if items}
    return non_empty or None


def _build_list_update(
    index: IntrospectionIndex,
    data_type_name: str,
    item: Params,
    previous: list[Any],
    diagnostics: Diagnostics,
) -> Params:
    previous_item: Params = next(
        (cast(Params, p) for p in previous if _record_id(p) == item["id"]), {}
    )
    nested = traverse_object(
        index,
        data_type_name,
        TraversalParams(data=item, previous_data=previous_item),
        diagnostics,
    )
    return {"where": {"id": item["id"]}, "data": nested.data_or_empty()}


def _add_removals(
    operations: Params,
    to_remove: list[Params],
    capabilities: MutationCapabilities,
    field_type: TypeRef,
    diagnostics: Diagnostics,
) -> None:
    if not to_remove:
        return
    if capabilities.removal_is_ambiguous:
        diagnostics.warn(
            "ambiguous_removal",
            f"Both delete and disconnect operations exist for type: {field_type.name}",
            type_name=field_type.name,
        )
    removal_kind = capabilities.removal_kind()
    if removal_kind is not None:
        operations[removal_kind] = to_remove


# -- Single relations ---------------------------------------------------------


def _build_object_mutation(
    index: IntrospectionIndex,
    parent_type_name: str,
    key: str,
    value: Params,
    previous: Params,
    diagnostics: Diagnostics,
) -> Params | None:
    capabilities = MutationCapabilities.probe(index, parent_type_name, key)
    has_id = bool(value.get("id"))

    if not has_id and previous.get("id"):
        return _build_object_removal(
            index, parent_type_name, key, previous["id"], capabilities, diagnostics
        )

    has_additional_fields = any(k != "id" for k in value)
    decision = decide_object_mutation(has_id, has_additional_fields, capabilities)
    if decision is ObjectMutation.SKIP:
        return None

    fields = _build_reference_fields(
        index, parent_type_name, key, decision, value, previous, diagnostics
    )
    if not fields:
        return None
    return {decision.value: fields}


def _build_object_removal(
    index: IntrospectionIndex,
    parent_type_name: str,
    key: str,
    previous_id: Any,
    capabilities: MutationCapabilities,
    diagnostics: Diagnostics,
) -> Params | None:
    removal_kind = capabilities.removal_kind()
    if removal_kind is None:
        return None
    if capabilities.removal_is_ambiguous:
        diagnostics.warn(
            "ambiguous_removal",
            f"Both delete and disconnect operations exist for field: {key}",
            type_name=parent_type_name,
            field=key,
        )
    removal_type = find_mutation_input_type(index, parent_type_name, key, removal_kind)
    # To-one removals are usually flags (`disconnect: Boolean`)
    if removal_type is not None and removal_type.kind in LEAF_KINDS:
        return {removal_kind: True}
    return {removal_kind: {"id": previous_id}}


def _build_reference_fields(
    index: IntrospectionIndex,
    parent_type_name: str,
    key: str,
    decision: ObjectMutation,
    value: Params,
    previous: Params,
    diagnostics: Diagnostics,
) -> Any:
    if decision is ObjectMutation.CONNECT:
        id_or_ids = value["id"]
        if isinstance(id_or_ids, list):
            return [{"id": v} for v in cast(list[Any], id_or_ids)]
        return {"id": id_or_ids}

    mutation_type = find_mutation_input_type(index, parent_type_name, key, decision.value)
    if mutation_type is None or mutation_type.name is None:
        return None

    if decision is ObjectMutation.CREATE:
        # Nested create has no `data` wrapper: owner: { create: { ... } }
        nested = traverse_object(
            index, mutation_type.name, TraversalParams(data=value), diagnostics
        )
        return nested.data_or_empty()

    # Either a flat data type or a {where, data} wrapper around one
    data_type = index.input_field(mutation_type.name, "data")
    wrapped_name = data_type.name if data_type is not None else None
    wrapped = wrapped_name is not None
    nested = traverse_object(
        index,
        wrapped_name or mutation_type.name,
        TraversalParams(data=value, previous_data=previous),
        diagnostics,
    )
    data = nested.data_or_empty()
    if not data:
        return None
    if wrapped or index.field_exists(mutation_type.name, "where"):
        return {"where": nested.where or {"id": value["id"]}, "data": data}
    return data
