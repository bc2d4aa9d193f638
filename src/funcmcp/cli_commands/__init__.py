"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from funcmcp.cli_commands.call import call
    from funcmcp.cli_commands.serve import serve
    from funcmcp.cli_commands.tools import tools

    cli.add_command(call)
    cli.add_command(serve)
    cli.add_command(tools)
