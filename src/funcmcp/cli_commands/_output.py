"""Shared CLI output formatters and config helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from funcmcp.protocol.models import JsonRpcResponse
    from funcmcp.server.config import ServerConfig
    from funcmcp.tools.registry import ToolRegistry

console = Console()
err_console = Console(stderr=True)


def load_config(path: str | None, *, out: Console = console) -> ServerConfig:
    """Load *path*, or the default config when no path is given; exit 1 on errors."""
    from funcmcp.server.config import ConfigError, ConfigLoader, ServerConfig

    if path is None:
        return ServerConfig()
    try:
        return ConfigLoader(Path(path)).load()
    except ConfigError as exc:
        out.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def print_tools_table(registry: ToolRegistry) -> None:
    """Pretty-print registered tools as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for tool in registry:
        table.add_row(tool.name, _truncate(tool.description))

    console.print(table)


def print_response(response: JsonRpcResponse) -> None:
    console.print_json(response.to_json())


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
