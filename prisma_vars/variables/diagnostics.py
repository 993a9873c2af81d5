"""Diagnostics collected while building variables.

The builders never print. Each non-fatal problem (a field the schema does
not know, a relation exposing both ``delete`` and ``disconnect``) is
recorded here and forwarded to an optional ``on_warning`` callback.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

DiagnosticKind = Literal["missing_field", "ambiguous_removal"]


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    type_name: str | None = None
    field: str | None = None


@dataclass
class Diagnostics:
    """Collector passed through a whole build."""

    entries: list[Diagnostic] = field(default_factory=lambda: list[Diagnostic]())
    on_warning: Callable[[Diagnostic], None] | None = None

    def warn(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        type_name: str | None = None,
        field: str | None = None,
    ) -> None:
        diagnostic = Diagnostic(kind=kind, message=message, type_name=type_name, field=field)
        self.entries.append(diagnostic)
        if self.on_warning is not None:
            self.on_warning(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.entries if d.kind == kind]
