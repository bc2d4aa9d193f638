"""Tool models: declared metadata and the registered tool itself."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from funcmcp.protocol.models import ToolDescriptor

ToolHandler = Callable[[dict[str, Any]], Any]


class ToolMetadata(BaseModel):
    """Metadata a tool module declares as its module-level ``metadata``.

    The input schema is opaque: it is forwarded to clients verbatim and never
    used to validate arguments.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str
    input_schema: Any = Field(default_factory=dict, alias="inputSchema")


class Tool(BaseModel):
    """A named, invocable tool.

    ``name`` comes from the registry key the tool was built under, never from
    the tool's own metadata.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str = ""
    input_schema: Any = Field(default_factory=dict)
    handler: ToolHandler = Field(exclude=True, repr=False)

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            msg = "tool name must not be empty"
            raise ValueError(msg)
        return value

    def descriptor(self) -> ToolDescriptor:
        """Return the public ``{name, description, inputSchema}`` view."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )

    async def invoke(self, arguments: dict[str, Any]) -> Any:
        """Call the handler, awaiting it when it is a coroutine function."""
        result = self.handler(arguments)
        if inspect.isawaitable(result):
            result = await result
        return result
