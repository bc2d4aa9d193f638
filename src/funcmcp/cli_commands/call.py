"""``funcmcp call``: run request bodies through one server instance."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from funcmcp.cli_commands._output import console, load_config, print_response


@click.command()
@click.argument("requests", nargs=-1)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Server config YAML. Defaults to the bundled sample tools.",
)
@click.option("--init", "auto_init", is_flag=True, help="Send an 'initialize' request first.")
def call(requests: tuple[str, ...], config_path: str | None, auto_init: bool) -> None:
    """Handle REQUESTS in order and print each response.

    Each REQUEST is a raw JSON-RPC request body.  All requests share one
    server, so an 'initialize' carries over to later tool calls.
    """
    from funcmcp.server.server import McpServer

    config = load_config(config_path)
    try:
        server = McpServer.from_config(config)
    except Exception as exc:
        console.print(f"[red]Tool loading error:[/red] {exc}")
        sys.exit(1)

    bodies = list(requests)
    if auto_init:
        bodies.insert(
            0,
            json.dumps({"jsonrpc": "2.0", "id": 0, "method": "initialize", "params": {}}),
        )
    if not bodies:
        console.print("[yellow]No requests given.[/yellow]")
        return

    async def _run() -> None:
        for body in bodies:
            print_response(await server.handle(body))

    asyncio.run(_run())
