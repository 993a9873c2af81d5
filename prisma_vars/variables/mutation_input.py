"""Resolve which nested-mutation operations a relation field accepts.

For a relation field ``author`` on ``PostCreateInput`` the schema generator
emits a wrapper such as ``AuthorCreateOneInput`` whose input fields are the
legal operations (``connect``, ``create``, ...). Each operation's own type
is the shape of the value nested under it.
"""

from __future__ import annotations

from dataclasses import dataclass

from prisma_vars.formats.introspection import TypeRef
from prisma_vars.variables.index import IntrospectionIndex
from prisma_vars.variables.types import (
    CONNECT,
    CREATE,
    DELETE,
    DISCONNECT,
    SET,
    UPDATE,
    ObjectMutation,
)


def find_mutation_input_type(
    index: IntrospectionIndex,
    parent_type_name: str,
    field: str,
    mutation_kind: str,
) -> TypeRef | None:
    """Type of ``mutation_kind`` on the wrapper type of ``parent.field``.

    Returns None when the field, its wrapper type, or the operation is
    missing.
    """
    field_type = index.input_field(parent_type_name, field)
    if field_type is None or field_type.name is None:
        return None
    return index.input_field(field_type.name, mutation_kind)


def has_mutation_input_type(
    index: IntrospectionIndex,
    parent_type_name: str,
    field: str,
    mutation_kind: str,
) -> bool:
    return find_mutation_input_type(index, parent_type_name, field, mutation_kind) is not None


@dataclass(frozen=True)
class MutationCapabilities:
    """Operations declared on one relation field's wrapper type."""

    connect: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False
    disconnect: bool = False
    set: bool = False

    @classmethod
    def probe(
        cls, index: IntrospectionIndex, parent_type_name: str, field: str
    ) -> MutationCapabilities:
        def has(kind: str) -> bool:
            return has_mutation_input_type(index, parent_type_name, field, kind)

        return cls(
            connect=has(CONNECT),
            create=has(CREATE),
            update=has(UPDATE),
            delete=has(DELETE),
            disconnect=has(DISCONNECT),
            set=has(SET),
        )

    def removal_kind(self) -> str | None:
        """Operation used to drop a related record; disconnect wins."""
        if self.disconnect:
            return DISCONNECT
        if self.delete:
            return DELETE
        return None

    @property
    def removal_is_ambiguous(self) -> bool:
        return self.delete and self.disconnect


def decide_object_mutation(
    has_id: bool,
    has_additional_fields: bool,
    capabilities: MutationCapabilities,
) -> ObjectMutation:
    """Pick the nested operation for a single relation value.

    =========  ========  ===============  ==========================
    result     has_id    additional       requires
    =========  ========  ===============  ==========================
    CONNECT    yes       no               connect
    CONNECT    yes       yes              connect, no create/update
    UPDATE     yes       yes              update
    CREATE     no        yes              create
    SKIP       anything else
    =========  ========  ===============  ==========================
    """
    can_write = capabilities.create or capabilities.update
    if capabilities.connect and has_id and (not has_additional_fields or not can_write):
        return ObjectMutation.CONNECT
    if capabilities.update and has_id and has_additional_fields:
        return ObjectMutation.UPDATE
    if capabilities.create and not has_id and has_additional_fields:
        return ObjectMutation.CREATE
    return ObjectMutation.SKIP
