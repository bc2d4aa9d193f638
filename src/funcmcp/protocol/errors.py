"""JSON-RPC error taxonomy.

Five error kinds with fixed wire codes.  Every failure raised while handling a
request is one of these (or is coerced into :class:`InternalError` by
:func:`classify`) before it reaches the dispatch boundary.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from funcmcp.protocol.models import JsonRpcErrorObject


class ErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


class ProtocolError(Exception):
    """Base error for all protocol-level failures.

    ``data`` is optional diagnostic payload.  Leaving it out is different from
    passing ``None``: only errors that carry data serialize a ``data`` member.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, *, data: Any = MISSING) -> None:
        self.message = message
        self.data = data
        super().__init__(message)

    @property
    def has_data(self) -> bool:
        return self.data is not MISSING

    def to_error_object(self) -> JsonRpcErrorObject:
        """Convert to the wire-level error object."""
        from funcmcp.protocol.models import JsonRpcErrorObject

        if self.has_data:
            return JsonRpcErrorObject(code=int(self.code), message=self.message, data=self.data)
        return JsonRpcErrorObject(code=int(self.code), message=self.message)


class ParseError(ProtocolError):
    """The request body is not valid JSON."""

    code = ErrorCode.PARSE_ERROR

    def __init__(self, message: str = "Invalid JSON", *, data: Any = MISSING) -> None:
        super().__init__(message, data=data)


class InvalidRequestError(ProtocolError):
    """The body is JSON but not a JSON-RPC request, or a precondition failed."""

    code = ErrorCode.INVALID_REQUEST

    def __init__(
        self, message: str = "Invalid JSON-RPC request", *, data: Any = MISSING
    ) -> None:
        super().__init__(message, data=data)


class MethodNotFoundError(ProtocolError):
    """The requested method is not served."""

    code = ErrorCode.METHOD_NOT_FOUND

    def __init__(self, method: str, *, data: Any = MISSING) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}", data=data)


class InvalidParamsError(ProtocolError):
    """``params`` is missing a required member or names an unknown tool."""

    code = ErrorCode.INVALID_PARAMS


class InternalError(ProtocolError):
    """Any other failure while handling a request."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self, message: str = "Internal server error", *, data: Any = MISSING
    ) -> None:
        super().__init__(message or "Internal server error", data=data)


class NotInitializedError(InvalidRequestError):
    """A tool method was called before the ``initialize`` handshake."""

    def __init__(self) -> None:
        super().__init__("Server not initialized")


class ToolNotFoundError(InvalidParamsError):
    """``tools/call`` named a tool that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolExecutionError(InternalError):
    """A tool handler raised while being invoked."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {detail or 'Unknown error'}")


def classify(exc: BaseException) -> ProtocolError:
    """Map any exception onto the taxonomy.

    Protocol errors pass through unchanged.  Everything else becomes an
    :class:`InternalError` whose message is the original exception's message.
    """
    if isinstance(exc, ProtocolError):
        return exc
    return InternalError(str(exc))
