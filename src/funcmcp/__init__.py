"""funcmcp: a minimal MCP (Model Context Protocol) server core over JSON-RPC 2.0."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from funcmcp.server.server import McpServer as McpServer
    from funcmcp.tools.models import Tool as Tool
    from funcmcp.tools.models import ToolMetadata as ToolMetadata

_LAZY_EXPORTS = {
    "McpServer": "funcmcp.server.server",
    "Tool": "funcmcp.tools.models",
    "ToolMetadata": "funcmcp.tools.models",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'funcmcp' has no attribute {name!r}")
