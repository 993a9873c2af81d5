"""Types shared by the variable builders.

Three groups:
1. Fetch types and resources: what the admin UI asks for
2. Nested-mutation operation names: fixed by the schema generator
3. Builder state: the per-level accumulator threaded through traversal
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from prisma_vars.formats.introspection import TypeDef
from prisma_vars.variables.index import IntrospectionIndex

Params = dict[str, Any]

# -- Fetch types and resources ------------------------------------------------


class FetchType(str, Enum):
    GET_LIST = "GET_LIST"
    GET_ONE = "GET_ONE"
    GET_MANY = "GET_MANY"
    GET_MANY_REFERENCE = "GET_MANY_REFERENCE"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ResourceNotFoundError(Exception):
    """Raised when a resource has no OBJECT type in the introspection."""

    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(f"No object type named {name!r} in the schema")
        self.name = name
        self.available: list[str] = available or []


@dataclass(frozen=True)
class Resource:
    """A logical entity and its introspected OBJECT type."""

    type: TypeDef

    @property
    def name(self) -> str:
        return self.type.name

    @property
    def where_input_name(self) -> str:
        return f"{self.name}WhereInput"

    @property
    def create_input_name(self) -> str:
        return f"{self.name}CreateInput"

    @property
    def update_input_name(self) -> str:
        return f"{self.name}UpdateInput"

    @classmethod
    def named(cls, name: str) -> Resource:
        """A resource known only by name (no object fields)."""
        return cls(type=TypeDef(kind="OBJECT", name=name, fields=[]))

    @classmethod
    def from_index(cls, index: IntrospectionIndex, name: str) -> Resource:
        type_def = index.type_by_name(name)
        if type_def is None or type_def.kind != "OBJECT":
            available = sorted(
                t.name
                for t in index.schema.types
                if t.kind == "OBJECT" and not t.name.startswith("__")
            )
            raise ResourceNotFoundError(name, available)
        return cls(type=type_def)


# -- Nested-mutation operations -----------------------------------------------

CONNECT = "connect"
DISCONNECT = "disconnect"
UPDATE = "update"
CREATE = "create"
DELETE = "delete"
SET = "set"


class ObjectMutation(str, Enum):
    """Decision for a single (non-list) relation value."""

    CONNECT = CONNECT
    UPDATE = UPDATE
    CREATE = CREATE
    SKIP = "skip"


# -- Builder state ------------------------------------------------------------


@dataclass
class TraversalParams:
    """The object being traversed and its pre-edit snapshot."""

    data: Params
    previous_data: Params = field(default_factory=lambda: dict[str, Any]())


@dataclass
class VariablesBuilder:
    """Accumulates ``where`` and ``data`` for one level of the input tree."""

    where: Params | None = None
    data: Params | None = None

    def set_where_id(self, value: Any) -> None:
        self.where = {"id": value}

    def set_data(self, key: str, value: Any) -> None:
        if self.data is None:
            self.data = {}
        self.data[key] = value

    def data_or_empty(self) -> Params:
        return self.data if self.data is not None else {}

    def to_variables(self) -> Params:
        variables: Params = {}
        if self.where is not None:
            variables["where"] = self.where
        if self.data is not None:
            variables["data"] = self.data
        return variables
