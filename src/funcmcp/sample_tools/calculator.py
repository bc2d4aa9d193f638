"""Basic arithmetic.

Failures are reported in-band (``success: false``) rather than raised, so a
bad operand is a normal tool result and not a JSON-RPC error.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from funcmcp.tools.models import ToolMetadata

metadata = ToolMetadata(
    description="Performs basic mathematical calculations (add, subtract, multiply, divide)",
    input_schema={
        "type": "object",
        "properties": {
            "operation": {
                "type": "string",
                "enum": ["add", "subtract", "multiply", "divide"],
                "description": "The mathematical operation to perform",
            },
            "a": {"type": "number", "description": "First number"},
            "b": {"type": "number", "description": "Second number"},
        },
        "required": ["operation", "a", "b"],
    },
)

_OPERATIONS: dict[str, tuple[str, Callable[[float, float], float]]] = {
    "add": ("+", operator.add),
    "subtract": ("-", operator.sub),
    "multiply": ("*", operator.mul),
    "divide": ("/", operator.truediv),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


async def handler(params: dict[str, Any]) -> dict[str, Any]:
    operation = params.get("operation")
    a = params.get("a")
    b = params.get("b")

    try:
        if not _is_number(a) or not _is_number(b):
            msg = "Both 'a' and 'b' must be numbers"
            raise ValueError(msg)
        if operation not in _OPERATIONS:
            msg = f"Unsupported operation: {operation}"
            raise ValueError(msg)
        symbol, fn = _OPERATIONS[operation]
        if operation == "divide" and b == 0:
            msg = "Cannot divide by zero"
            raise ValueError(msg)
        result = fn(a, b)
    except ValueError as exc:
        return {
            "success": False,
            "error": str(exc),
            "params": params,
            "timestamp": _now(),
        }

    return {
        "success": True,
        "calculation": {
            "expression": f"{a} {symbol} {b}",
            "result": result,
            "operation": operation,
        },
        "timestamp": _now(),
    }
