"""CLI entry point for prisma-vars."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from prisma_vars.commands.build.cmd import build
from prisma_vars.commands.schema.cmd import schema

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="prisma-vars")
def cli() -> None:
    """Translate admin-UI CRUD requests into Prisma GraphQL variables."""


cli.add_command(build)
cli.add_command(schema)


if __name__ == "__main__":
    cli()
