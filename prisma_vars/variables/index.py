"""Read-only lookups over an introspection result."""

from __future__ import annotations

from typing import Any

from prisma_vars.formats.introspection import (
    WRAPPER_KINDS,
    IntrospectionSchema,
    TypeDef,
    TypeRef,
)


class IntrospectionIndex:
    """Name-keyed view of an introspection result.

    Built once per schema snapshot and never mutated, so one index can be
    shared by any number of builds. Lookups return ``None`` instead of
    raising when a type or field is missing.
    """

    def __init__(self, schema: IntrospectionSchema):
        self.schema = schema
        self._types: dict[str, TypeDef] = {}
        for type_def in schema.types:
            self._types.setdefault(type_def.name, type_def)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> IntrospectionIndex:
        return cls(IntrospectionSchema.from_data(data))

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def type_by_name(self, name: str) -> TypeDef | None:
        return self._types.get(name)

    @staticmethod
    def final_type(type_ref: TypeRef) -> TypeRef:
        """Strip NON_NULL/LIST wrappers down to the named type."""
        current = type_ref
        while current.kind in WRAPPER_KINDS and current.of_type is not None:
            current = current.of_type
        return current

    def input_field(self, type_name: str, field_name: str) -> TypeRef | None:
        """Final type of ``field_name`` on the input type ``type_name``."""
        type_def = self._types.get(type_name)
        if type_def is None:
            return None
        input_value = type_def.find_input_field(field_name)
        if input_value is None:
            return None
        return self.final_type(input_value.type)

    def field_exists(self, type_name: str, field_name: str) -> bool:
        return self.input_field(type_name, field_name) is not None

    def object_field(self, type_name: str, field_name: str) -> TypeRef | None:
        """Final type of ``field_name`` on the output type ``type_name``."""
        type_def = self._types.get(type_name)
        if type_def is None:
            return None
        field_def = type_def.find_field(field_name)
        if field_def is None:
            return None
        return self.final_type(field_def.type)

    def input_field_names(self, type_name: str) -> list[str]:
        type_def = self._types.get(type_name)
        if type_def is None:
            return []
        return [f.name for f in type_def.input_fields or []]
