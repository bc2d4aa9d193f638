"""Tests for tool building and the tool registry."""

from types import SimpleNamespace
from typing import Any

import pytest

from funcmcp.tools.errors import DuplicateToolError, InvalidToolModuleError
from funcmcp.tools.models import Tool, ToolMetadata
from funcmcp.tools.registry import ToolRegistry, build_registry, build_tools


async def _noop(params: dict[str, Any]) -> None:
    return None


def _tool(name: str, description: str = "") -> Tool:
    return Tool(name=name, description=description, input_schema={}, handler=_noop)


class TestBuildTools:
    def test_name_comes_from_key(self) -> None:
        module = SimpleNamespace(
            metadata={"name": "ignored", "description": "d", "inputSchema": {"type": "object"}},
            handler=_noop,
        )
        (tool,) = build_tools({"fromKey": module})
        assert tool.name == "fromKey"
        assert tool.description == "d"
        assert tool.input_schema == {"type": "object"}
        assert tool.handler is _noop

    def test_accepts_metadata_model(self) -> None:
        module = SimpleNamespace(
            metadata=ToolMetadata(description="d", input_schema={"x": 1}),
            handler=_noop,
        )
        (tool,) = build_tools({"t": module})
        assert tool.input_schema == {"x": 1}

    @pytest.mark.parametrize(
        "metadata",
        [
            SimpleNamespace(description="d", input_schema={"x": 1}),
            SimpleNamespace(description="d", inputSchema={"x": 1}),
        ],
    )
    def test_accepts_metadata_object(self, metadata: Any) -> None:
        (tool,) = build_tools({"t": SimpleNamespace(metadata=metadata, handler=_noop)})
        assert tool.description == "d"
        assert tool.input_schema == {"x": 1}

    def test_schema_is_opaque(self) -> None:
        schema = {"type": "not-a-real-type", "whatever": [1, {"deep": True}]}
        module = SimpleNamespace(metadata={"description": "", "inputSchema": schema}, handler=_noop)
        (tool,) = build_tools({"t": module})
        assert tool.input_schema == schema

    def test_preserves_order(self) -> None:
        modules = {
            name: SimpleNamespace(metadata={"description": name}, handler=_noop)
            for name in ["zeta", "alpha", "mid"]
        }
        assert [t.name for t in build_tools(modules)] == ["zeta", "alpha", "mid"]

    def test_missing_metadata(self) -> None:
        with pytest.raises(InvalidToolModuleError, match="metadata"):
            build_tools({"t": SimpleNamespace(handler=_noop)})

    def test_bad_metadata(self) -> None:
        with pytest.raises(InvalidToolModuleError, match="bad metadata"):
            build_tools({"t": SimpleNamespace(metadata={"inputSchema": {}}, handler=_noop)})

    def test_missing_handler(self) -> None:
        module = SimpleNamespace(metadata={"description": "d"}, handler="not callable")
        with pytest.raises(InvalidToolModuleError, match="handler"):
            build_tools({"t": module})


class TestBuildRegistry:
    def test_lookup(self) -> None:
        index = build_registry([_tool("a"), _tool("b")])
        assert index["b"].name == "b"

    def test_read_only(self) -> None:
        index = build_registry([_tool("a")])
        with pytest.raises(TypeError):
            index["b"] = _tool("b")  # type: ignore[index]

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(DuplicateToolError, match="dup"):
            build_registry([_tool("dup", "first"), _tool("dup", "second")])


class TestToolRegistry:
    def test_from_modules(self) -> None:
        registry = ToolRegistry.from_modules(
            {"one": SimpleNamespace(metadata={"description": "1"}, handler=_noop)}
        )
        assert len(registry) == 1
        assert "one" in registry
        assert registry.get("one") is not None
        assert registry.get("two") is None

    def test_descriptors_exclude_handler(self) -> None:
        registry = ToolRegistry([_tool("a", "desc")])
        (desc,) = registry.descriptors()
        wire = desc.to_wire()
        assert wire == {"name": "a", "description": "desc", "inputSchema": {}}
        assert "handler" not in wire

    def test_iteration_order(self) -> None:
        registry = ToolRegistry([_tool("b"), _tool("a")])
        assert registry.names() == ["b", "a"]
        assert [t.name for t in registry] == ["b", "a"]

    def test_empty(self) -> None:
        registry = ToolRegistry()
        assert len(registry) == 0
        assert registry.descriptors() == []


class TestTool:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            _tool("")

    def test_frozen(self) -> None:
        tool = _tool("a")
        with pytest.raises(ValueError):
            tool.name = "b"  # type: ignore[misc]

    def test_dump_excludes_handler(self) -> None:
        assert "handler" not in _tool("a").model_dump()

    async def test_invoke_async(self) -> None:
        async def handler(params: dict[str, Any]) -> dict[str, Any]:
            return {"got": params}

        tool = Tool(name="t", handler=handler)
        assert await tool.invoke({"x": 1}) == {"got": {"x": 1}}

    async def test_invoke_sync(self) -> None:
        tool = Tool(name="t", handler=lambda params: params["n"] * 2)
        assert await tool.invoke({"n": 4}) == 8
