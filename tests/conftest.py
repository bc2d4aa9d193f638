"""Shared fixtures: in-memory tool modules and servers built from them."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from funcmcp.server.server import McpServer
from funcmcp.tools.models import ToolMetadata


async def _echo(params: dict[str, Any]) -> dict[str, Any]:
    return {"echo": params}


async def _explode(params: dict[str, Any]) -> Any:
    msg = "kaboom"
    raise RuntimeError(msg)


def _sync_add(params: dict[str, Any]) -> int:
    return int(params["a"]) + int(params["b"])


ECHO_SCHEMA = {"type": "object", "properties": {"value": {"type": "string"}}}


@pytest.fixture
def tool_modules() -> dict[str, Any]:
    return {
        "echo": SimpleNamespace(
            metadata=ToolMetadata(description="Echo the arguments", input_schema=ECHO_SCHEMA),
            handler=_echo,
        ),
        "explode": SimpleNamespace(
            metadata={"description": "Always fails", "inputSchema": {"type": "object"}},
            handler=_explode,
        ),
        "add": SimpleNamespace(
            metadata={"description": "Synchronous addition", "inputSchema": {}},
            handler=_sync_add,
        ),
    }


@pytest.fixture
def server(tool_modules: dict[str, Any]) -> McpServer:
    return McpServer.from_modules("X", "1.0.0", tool_modules)


@pytest.fixture
async def initialized_server(server: McpServer) -> McpServer:
    response = await server.handle(rpc_body("initialize", params={}))
    assert response.error is None
    return server


def rpc_body(method: str, *, id: Any = 1, params: Any = None, omit_id: bool = False) -> str:
    """Build a raw JSON-RPC request body."""
    body: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
    if not omit_id:
        body["id"] = id
    if params is not None:
        body["params"] = params
    return json.dumps(body)
