"""Map admin-UI CRUD requests to Prisma-style GraphQL variables."""

from __future__ import annotations

from prisma_vars.variables.diagnostics import (
    Diagnostic as Diagnostic,
    Diagnostics as Diagnostics,
)
from prisma_vars.variables.dispatch import build_variables as build_variables
from prisma_vars.variables.index import IntrospectionIndex as IntrospectionIndex
from prisma_vars.variables.types import (
    FetchType as FetchType,
    Resource as Resource,
    ResourceNotFoundError as ResourceNotFoundError,
)

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "FetchType",
    "IntrospectionIndex",
    "Resource",
    "ResourceNotFoundError",
    "build_variables",
]
