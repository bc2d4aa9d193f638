"""``funcmcp serve``: serve tools over stdio."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from funcmcp.cli_commands._output import err_console, load_config

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Server config YAML. Defaults to the bundled sample tools.",
)
def serve(config_path: str | None) -> None:
    """Read JSON-RPC requests from stdin, one per line, and answer on stdout."""
    from funcmcp.server.server import McpServer
    from funcmcp.transport.stdio import StdioServer
    from funcmcp.utils.telemetry import configure_telemetry

    config = load_config(config_path, out=err_console)

    if config.telemetry is not None:
        configure_telemetry(config.telemetry, service_name=config.name)

    try:
        server = McpServer.from_config(config)
    except Exception as exc:
        err_console.print(f"[red]Tool loading error:[/red] {exc}")
        sys.exit(1)

    logger.info("Serving %s %s with %d tool(s)", config.name, config.version, len(server.tools))
    asyncio.run(StdioServer(server).serve())
