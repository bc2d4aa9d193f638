"""Tool registry: built once from tool modules, read-only afterwards.

Typical usage::

    from funcmcp.tools.loader import load_tool_package

    registry = ToolRegistry.from_modules(load_tool_package("funcmcp.sample_tools"))
    tool = registry.get("calculator")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from funcmcp.protocol.models import ToolDescriptor
from funcmcp.tools.errors import DuplicateToolError, InvalidToolModuleError
from funcmcp.tools.models import Tool, ToolMetadata


def build_tools(modules: Mapping[str, Any]) -> list[Tool]:
    """Build one :class:`Tool` per entry of *modules*, in mapping order.

    Each module must expose ``metadata`` (a :class:`ToolMetadata`, a mapping,
    or any object with ``description`` and ``inputSchema`` attributes) and a
    callable ``handler``.

    Raises:
        InvalidToolModuleError: A module does not satisfy that contract.
    """
    tools: list[Tool] = []
    for name, module in modules.items():
        raw_metadata = getattr(module, "metadata", None)
        if raw_metadata is None:
            raise InvalidToolModuleError(name, "missing 'metadata'")
        try:
            metadata = ToolMetadata.model_validate(raw_metadata, from_attributes=True)
        except ValidationError as exc:
            raise InvalidToolModuleError(name, f"bad metadata: {exc}") from exc

        handler = getattr(module, "handler", None)
        if not callable(handler):
            raise InvalidToolModuleError(name, "missing callable 'handler'")

        tools.append(
            Tool(
                name=name,
                description=metadata.description,
                input_schema=metadata.input_schema,
                handler=handler,
            )
        )
    return tools


def build_registry(tools: Iterable[Tool]) -> Mapping[str, Tool]:
    """Index *tools* by name.

    Raises:
        DuplicateToolError: Two tools share a name.
    """
    index: dict[str, Tool] = {}
    for tool in tools:
        if tool.name in index:
            raise DuplicateToolError(tool.name)
        index[tool.name] = tool
    return MappingProxyType(index)


class ToolRegistry:
    """Immutable, ordered collection of tools with O(1) lookup by name."""

    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools: tuple[Tool, ...] = tuple(tools)
        self._index = build_registry(self._tools)

    @classmethod
    def from_modules(cls, modules: Mapping[str, Any]) -> ToolRegistry:
        return cls(build_tools(modules))

    def get(self, name: str) -> Tool | None:
        return self._index.get(name)

    def names(self) -> list[str]:
        return [tool.name for tool in self._tools]

    def descriptors(self) -> list[ToolDescriptor]:
        """Return the advertised view of every tool, in registration order."""
        return [tool.descriptor() for tool in self._tools]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({self.names()!r})"
