"""Transport adapters for :class:`~funcmcp.server.server.McpServer`."""

from funcmcp.transport.stdio import StdioServer

__all__ = ["StdioServer"]
