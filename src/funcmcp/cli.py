"""funcmcp CLI entrypoint."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from funcmcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="funcmcp")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for diagnostics written to stderr.",
)
def main(log_level: str) -> None:
    """Serve tools over the Model Context Protocol."""
    from funcmcp.cli_commands._output import err_console

    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# Register subcommands
from funcmcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
