"""``funcmcp tools``: inspect the tools a server config would serve."""

from __future__ import annotations

import json
import sys

import click

from funcmcp.cli_commands._output import console, load_config, print_tools_table

_CONFIG_HELP = "Server config YAML. Defaults to the bundled sample tools."


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None, help=_CONFIG_HELP)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON (tools/list shape).")
def list_tools(config_path: str | None, as_json: bool) -> None:
    """List the tools registered by a server config."""
    from funcmcp.tools.registry import ToolRegistry

    config = load_config(config_path)
    try:
        registry = ToolRegistry.from_modules(config.tools.load())
    except Exception as exc:
        console.print(f"[red]Tool loading error:[/red] {exc}")
        sys.exit(1)

    if as_json:
        payload = {"tools": [d.to_wire() for d in registry.descriptors()]}
        console.print_json(json.dumps(payload))
        return

    if len(registry) == 0:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(registry)
