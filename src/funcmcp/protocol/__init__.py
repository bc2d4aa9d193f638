"""Protocol layer: JSON-RPC 2.0 codec, wire models and error taxonomy."""

from funcmcp.protocol.codec import (
    error_response,
    is_valid_request,
    notification,
    parse_message,
    success_response,
)
from funcmcp.protocol.errors import (
    ErrorCode,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    NotInitializedError,
    ParseError,
    ProtocolError,
    ToolExecutionError,
    ToolNotFoundError,
    classify,
)
from funcmcp.protocol.models import (
    JsonRpcErrorObject,
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResponse,
)

__all__ = [
    "ErrorCode",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcErrorObject",
    "JsonRpcNotification",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "NotInitializedError",
    "ParseError",
    "ProtocolError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "classify",
    "error_response",
    "is_valid_request",
    "notification",
    "parse_message",
    "success_response",
]
