"""Wire models: JSON-RPC 2.0 envelopes and MCP payloads.

The models validate incoming data and produce outgoing data.  Outgoing
messages are rendered with ``to_wire()`` rather than ``model_dump()`` so that
optional members (``error.data``, notification ``params``) are omitted instead
of being emitted as ``null``.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic_core import to_jsonable_python

JSONRPC_VERSION = "2.0"

# Non-finite floats have no JSON spelling and are not valid ids.
RequestId = Union[StrictStr, StrictInt, Annotated[float, Strict(), AllowInfNan(False)], None]

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request.  A request without ``id`` is a notification."""

    jsonrpc: Literal["2.0"]
    method: StrictStr = Field(min_length=1)
    id: RequestId = None
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class JsonRpcErrorObject(BaseModel):
    """The ``error`` member of a failed response."""

    code: int
    message: str
    data: Any = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if "data" in self.model_fields_set:
            payload["data"] = to_jsonable_python(self.data, fallback=str)
        return payload


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response carrying exactly one of ``result`` or ``error``."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    result: Any = None
    error: JsonRpcErrorObject | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> JsonRpcResponse:
        if self.error is not None and "result" in self.model_fields_set:
            msg = "a response cannot carry both 'result' and 'error'"
            raise ValueError(msg)
        return self

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.to_wire()
        else:
            payload["result"] = to_jsonable_python(self.result, fallback=str)
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), ensure_ascii=False)


class JsonRpcNotification(BaseModel):
    """A server-initiated message that expects no response."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    params: Any = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not None:
            payload["params"] = to_jsonable_python(self.params, fallback=str)
        return payload


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ServerInfo(_WireModel):
    name: str
    version: str


class InitializeResult(_WireModel):
    protocol_version: str = Field(alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")


class ToolDescriptor(_WireModel):
    """A tool as advertised by ``tools/list``.  The handler is never included."""

    name: str
    description: str = ""
    input_schema: Any = Field(default=None, alias="inputSchema")


class TextContent(_WireModel):
    type: Literal["text"] = "text"
    text: str


class CallToolResult(_WireModel):
    content: list[TextContent] = Field(default_factory=list)
