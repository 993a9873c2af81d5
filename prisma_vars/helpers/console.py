"""Shared consoles and printing helpers for CLI commands."""

from __future__ import annotations

from rich.console import Console

from prisma_vars.variables.diagnostics import Diagnostic

console = Console()

# Warnings go to stderr so stdout stays pipeable JSON
err_console = Console(stderr=True)


def truncate(s: str, max_len: int) -> str:
    """Truncate a string to max_len, adding '...' if needed."""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def print_diagnostic(diagnostic: Diagnostic) -> None:
    """Print a builder diagnostic as a yellow warning line."""
    location = diagnostic.type_name or "?"
    if diagnostic.field:
        location = f"{location}.{diagnostic.field}"
    err_console.print(
        f"[yellow]warning[/yellow] [dim]{diagnostic.kind}[/dim] {location}: {diagnostic.message}"
    )
