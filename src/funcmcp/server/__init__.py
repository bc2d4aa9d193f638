"""Server layer: session state, dispatcher and configuration."""

from funcmcp.server.config import ConfigError, ConfigLoader, ServerConfig, TelemetrySettings, ToolSource
from funcmcp.server.server import SUPPORTED_PROTOCOL_VERSION, McpMethod, McpServer, render_tool_result
from funcmcp.server.session import ServerSession

__all__ = [
    "SUPPORTED_PROTOCOL_VERSION",
    "ConfigError",
    "ConfigLoader",
    "McpMethod",
    "McpServer",
    "ServerConfig",
    "ServerSession",
    "TelemetrySettings",
    "ToolSource",
    "render_tool_result",
]
