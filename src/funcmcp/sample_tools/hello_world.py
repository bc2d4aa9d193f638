"""Returns a friendly greeting."""

from __future__ import annotations

from typing import Any

from funcmcp.tools.models import ToolMetadata

metadata = ToolMetadata(
    description="Returns a friendly greeting",
    input_schema={
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "required": ["name"],
    },
)


async def handler(params: dict[str, Any]) -> dict[str, Any]:
    return {"message": f"Hello, {params.get('name')}!"}
