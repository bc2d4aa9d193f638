"""Message codec: raw request text in, response envelopes out."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from funcmcp.protocol.errors import InvalidRequestError, ParseError, ProtocolError
from funcmcp.protocol.models import (
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResponse,
    RequestId,
)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are accepted by the json module but are not JSON.
    msg = f"non-standard JSON constant: {name}"
    raise ValueError(msg)


def parse_message(text: str | bytes | bytearray) -> JsonRpcRequest:
    """Parse a request body into a validated :class:`JsonRpcRequest`.

    Raises:
        ParseError: The body is not syntactically valid JSON.
        InvalidRequestError: The JSON value is not a JSON-RPC 2.0 request.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise ParseError() from exc

    if not is_valid_request(data):
        raise InvalidRequestError()
    return JsonRpcRequest.model_validate(data)


def is_valid_request(data: Any) -> bool:
    """Return whether *data* has the shape of a JSON-RPC 2.0 request."""
    if isinstance(data, JsonRpcRequest):
        return True
    if not isinstance(data, dict):
        return False
    try:
        JsonRpcRequest.model_validate(data)
    except ValidationError:
        return False
    return True


def success_response(request_id: RequestId, result: Any) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, result=result)


def error_response(request_id: RequestId, error: ProtocolError) -> JsonRpcResponse:
    """Wrap *error* in a response envelope; ``data`` is kept only if present."""
    return JsonRpcResponse(id=request_id, error=error.to_error_object())


def notification(method: str, params: Any = None) -> JsonRpcNotification:
    return JsonRpcNotification(method=method, params=params)
