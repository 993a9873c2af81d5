"""Pydantic models for the admin-UI request params, one per fetch type.

The variable builders take plain dicts and do not check their shape; the
CLI validates params files against these models first and hands the
``to_params()`` dict to the builders.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class _Params(BaseModel):
    model_config = {"populate_by_name": True}

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class Pagination(BaseModel):
    page: int = 1
    per_page: int = Field(default=10, alias="perPage")

    model_config = {"populate_by_name": True}


class Sort(BaseModel):
    field: str = "id"
    order: str = "ASC"


class GetListParams(_Params):
    filter: dict[str, Any] = Field(default_factory=dict)
    pagination: Pagination = Field(default_factory=Pagination)
    sort: Sort = Field(default_factory=Sort)


class GetOneParams(_Params):
    id: Any


class GetManyParams(_Params):
    ids: list[Any]


class GetManyReferenceParams(_Params):
    target: str
    id: Any


class CreateParams(_Params):
    data: dict[str, Any]


class UpdateParams(_Params):
    id: Any = None
    data: dict[str, Any]
    previous_data: dict[str, Any] = Field(default_factory=dict, alias="previousData")


class DeleteParams(_Params):
    id: Any
