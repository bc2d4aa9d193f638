"""Tool layer: tool models, registry and module loading."""

from funcmcp.tools.errors import (
    DuplicateToolError,
    InvalidToolModuleError,
    ToolLoadError,
    ToolRegistryError,
)
from funcmcp.tools.loader import load_tool_modules, load_tool_package
from funcmcp.tools.models import Tool, ToolHandler, ToolMetadata
from funcmcp.tools.registry import ToolRegistry, build_registry, build_tools

__all__ = [
    "DuplicateToolError",
    "InvalidToolModuleError",
    "Tool",
    "ToolHandler",
    "ToolLoadError",
    "ToolMetadata",
    "ToolRegistry",
    "ToolRegistryError",
    "build_registry",
    "build_tools",
    "load_tool_modules",
    "load_tool_package",
]
