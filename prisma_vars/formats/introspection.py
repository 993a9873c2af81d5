"""Pydantic models for GraphQL introspection results (``__schema.types``).

Only the parts the variable builders read are modelled: type kinds and
names, object fields, input fields, and (possibly wrapped) type references.
Every field has a default so that partial or hand-written introspection
snippets still parse; absence shows up as ``None`` or an empty list.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import BaseModel, Field

# Wrapper kinds that never carry a name of their own
WRAPPER_KINDS = frozenset({"NON_NULL", "LIST"})

# Kinds copied verbatim into mutation data
LEAF_KINDS = frozenset({"SCALAR", "ENUM"})


class TypeRef(BaseModel):
    kind: str = ""
    name: str | None = None
    of_type: TypeRef | None = Field(default=None, alias="ofType")

    model_config = {"populate_by_name": True}


class InputValue(BaseModel):
    name: str
    type: TypeRef = Field(default_factory=TypeRef)
    default_value: str | None = Field(default=None, alias="defaultValue")

    model_config = {"populate_by_name": True}


class FieldDef(BaseModel):
    name: str
    type: TypeRef = Field(default_factory=TypeRef)
    args: list[InputValue] = []


class TypeDef(BaseModel):
    kind: str = ""
    name: str
    fields: list[FieldDef] | None = None
    input_fields: list[InputValue] | None = Field(default=None, alias="inputFields")

    model_config = {"populate_by_name": True}

    def find_input_field(self, name: str) -> InputValue | None:
        for input_field in self.input_fields or []:
            if input_field.name == name:
                return input_field
        return None

    def find_field(self, name: str) -> FieldDef | None:
        for object_field in self.fields or []:
            if object_field.name == name:
                return object_field
        return None


class IntrospectionSchema(BaseModel):
    """The ``types`` list of an introspection result."""

    types: list[TypeDef] = []

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> IntrospectionSchema:
        """Validate an introspection payload.

        Accepts a full GraphQL response (``{"data": {"__schema": ...}}``),
        the bare query result (``{"__schema": ...}``), or just
        ``{"types": [...]}``.
        """
        payload: Any = data
        if isinstance(payload, dict) and "data" in payload:
            payload = cast(dict[str, Any], payload)["data"]
        if isinstance(payload, dict) and "__schema" in payload:
            payload = cast(dict[str, Any], payload)["__schema"]
        return cls.model_validate(payload)
