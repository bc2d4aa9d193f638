"""McpServer: JSON-RPC dispatcher for the MCP handshake and tool calls.

One instance per logical server.  ``handle()`` is the single entry point for
transports: it takes a raw request body and always returns a response,
converting every failure into a JSON-RPC error.

Usage::

    server = McpServer.from_modules("demo", "1.0.0", load_tool_package("my_tools"))
    response = await server.handle('{"jsonrpc": "2.0", "id": 1, "method": "initialize"}')
    body = response.to_json()
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic_core import to_jsonable_python

from funcmcp.protocol.codec import error_response, is_valid_request, parse_message, success_response
from funcmcp.protocol.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    ToolExecutionError,
    ToolNotFoundError,
    classify,
)
from funcmcp.protocol.models import (
    CallToolResult,
    InitializeResult,
    ServerInfo,
    TextContent,
)
from funcmcp.server.session import ServerSession
from funcmcp.tools.registry import ToolRegistry
from funcmcp.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_SERVER_NAME,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from opentelemetry.trace import Span

    from funcmcp.protocol.models import JsonRpcRequest, JsonRpcResponse
    from funcmcp.server.config import ServerConfig
    from funcmcp.tools.models import Tool

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SUPPORTED_PROTOCOL_VERSION = "2024-11-05"
SERVER_CAPABILITIES: dict[str, Any] = {"tools": {}}

_MethodHandler = Callable[[Any], Awaitable[Any]]


class McpMethod(str, Enum):
    """Methods the server dispatches."""

    INITIALIZE = "initialize"
    INITIALIZED = "initialized"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


def render_tool_result(value: Any) -> str:
    """Render a tool's return value as indented JSON text.

    Raises:
        ValueError: The value holds a non-finite float.
    """
    return json.dumps(
        to_jsonable_python(value, fallback=str), indent=2, ensure_ascii=False, allow_nan=False
    )


class McpServer:
    """Routes JSON-RPC requests through the MCP session state machine.

    The session starts uninitialized; ``tools/list`` and ``tools/call`` are
    rejected with ``InvalidRequest`` until an ``initialize`` succeeds.
    """

    def __init__(
        self,
        name: str,
        version: str,
        tools: ToolRegistry | Iterable[Tool] = (),
    ) -> None:
        self._session = ServerSession(name=name, version=version)
        self._registry = tools if isinstance(tools, ToolRegistry) else ToolRegistry(tools)
        self._handlers: dict[McpMethod, _MethodHandler] = {
            McpMethod.INITIALIZE: self._handle_initialize,
            McpMethod.INITIALIZED: self._handle_initialized,
            McpMethod.TOOLS_LIST: self._handle_tools_list,
            McpMethod.TOOLS_CALL: self._handle_tools_call,
        }
        unhandled = [m.value for m in McpMethod if m not in self._handlers]
        if unhandled:
            msg = f"no handler registered for: {', '.join(unhandled)}"
            raise TypeError(msg)

    @classmethod
    def from_modules(cls, name: str, version: str, modules: Mapping[str, Any]) -> McpServer:
        """Build a server from a ``tool name -> tool module`` mapping."""
        return cls(name, version, ToolRegistry.from_modules(modules))

    @classmethod
    def from_config(cls, config: ServerConfig) -> McpServer:
        return cls.from_modules(config.name, config.version, config.tools.load())

    @property
    def session(self) -> ServerSession:
        return self._session

    @property
    def tools(self) -> ToolRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def handle(self, text: str | bytes) -> JsonRpcResponse:
        """Handle one raw request body and return its response.

        Never raises for failures inside request handling; they all come back
        as error responses.
        """
        with _tracer.start_as_current_span("mcp.handle") as span:
            span.set_attribute(ATTR_SERVER_NAME, self._session.name)
            response = await self._handle(text, span)
            if response.error is not None:
                span.set_attribute(ATTR_ERROR_CODE, response.error.code)
            return response

    async def dispatch(self, request: JsonRpcRequest) -> Any:
        """Run the handler for an already-parsed request and return its result.

        Raises:
            ProtocolError: The method is unknown or the handler failed.
        """
        try:
            method = McpMethod(request.method)
        except ValueError:
            raise MethodNotFoundError(request.method) from None
        return await self._handlers[method](request.params)

    async def _handle(self, text: str | bytes, span: Span) -> JsonRpcResponse:
        try:
            request = parse_message(text)
            if not is_valid_request(request):
                raise InvalidRequestError()
        except ProtocolError as exc:
            logger.debug("Rejected request body: %s", exc.message)
            return error_response(None, exc)
        except Exception:
            logger.exception("Failed to parse request")
            return error_response(None, ParseError("Failed to parse request"))

        span.set_attribute(ATTR_METHOD, request.method)
        if request.id is not None:
            span.set_attribute(ATTR_REQUEST_ID, str(request.id))

        try:
            result = await self.dispatch(request)
        except Exception as exc:
            if not isinstance(exc, ProtocolError):
                logger.exception("Unhandled error in %s", request.method)
            return error_response(request.id, classify(exc))
        return success_response(request.id, result)

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------

    async def _handle_initialize(self, params: Any) -> dict[str, Any]:
        declared = params if isinstance(params, dict) else {}
        protocol_version = declared.get("protocolVersion")
        client_info = declared.get("clientInfo")
        # Client declarations are informational; ill-typed ones are ignored.
        if not isinstance(protocol_version, str):
            protocol_version = None
        if not isinstance(client_info, dict):
            client_info = None

        self._session.mark_initialized(protocol_version=protocol_version, client_info=client_info)
        logger.info(
            "Session initialized (client=%s, requested protocol=%s)",
            (client_info or {}).get("name", "?"),
            protocol_version or "?",
        )

        return InitializeResult(
            protocol_version=SUPPORTED_PROTOCOL_VERSION,
            capabilities=SERVER_CAPABILITIES,
            server_info=ServerInfo(name=self._session.name, version=self._session.version),
        ).to_wire()

    async def _handle_initialized(self, params: Any) -> dict[str, Any]:
        return {}

    async def _handle_tools_list(self, params: Any) -> dict[str, Any]:
        self._session.require_initialized()
        return {"tools": [d.to_wire() for d in self._registry.descriptors()]}

    async def _handle_tools_call(self, params: Any) -> dict[str, Any]:
        self._session.require_initialized()

        if not isinstance(params, dict) or not isinstance(params.get("name"), str):
            raise InvalidParamsError("Missing tool name")
        name: str = params["name"]

        tool = self._registry.get(name)
        if tool is None:
            raise ToolNotFoundError(name)

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParamsError("Tool arguments must be an object")

        with _tracer.start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                value = await tool.invoke(arguments)
            except Exception as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                raise ToolExecutionError(name, str(exc)) from exc

        try:
            text = render_tool_result(value)
        except ValueError as exc:
            logger.warning("Tool %s returned an unserializable result: %s", name, exc)
            raise InternalError(f"Tool result is not valid JSON: {exc}") from exc
        return CallToolResult(content=[TextContent(text=text)]).to_wire()
