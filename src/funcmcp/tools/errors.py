"""Errors raised while building the tool registry.

These are construction-time failures and are never turned into JSON-RPC
responses.
"""


class ToolRegistryError(Exception):
    """Base error for tool registry construction failures."""


class DuplicateToolError(ToolRegistryError):
    """Two tools were registered under the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate tool name: {name}")


class InvalidToolModuleError(ToolRegistryError):
    """A tool module does not satisfy the tool module contract."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid tool module: {name}" + (f" ({detail})" if detail else ""))


class ToolLoadError(ToolRegistryError):
    """A tool module could not be imported."""

    def __init__(self, target: str, detail: str = "") -> None:
        self.target = target
        self.detail = detail
        super().__init__(f"Cannot load tool module: {target}" + (f" ({detail})" if detail else ""))
