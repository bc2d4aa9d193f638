"""Server configuration: YAML file or built-in defaults.

Example ``funcmcp.yaml``::

    name: hello-world-mcp-server
    version: 1.0.0
    tools:
      package: funcmcp.sample_tools
    telemetry:
      enabled: true
      otlp_endpoint: ${OTLP_ENDPOINT}
"""

from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003
from types import ModuleType  # noqa: TC003
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from funcmcp import __version__
from funcmcp.tools.loader import load_tool_modules, load_tool_package

DEFAULT_TOOL_PACKAGE = "funcmcp.sample_tools"


class ConfigError(Exception):
    """Raised when a server config file fails parsing or validation."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    export_to_console: bool = False
    otlp_endpoint: str | None = None


class ToolSource(BaseModel):
    """Where the server's tool modules come from.

    Either a ``package`` whose public submodules are tools, or an explicit
    ``modules`` mapping of tool name to dotted module path.  Not both.
    """

    package: str | None = None
    modules: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _one_source(self) -> ToolSource:
        if self.package and self.modules:
            msg = "tools: set either 'package' or 'modules', not both"
            raise ValueError(msg)
        if not self.package and not self.modules:
            self.package = DEFAULT_TOOL_PACKAGE
        return self

    def load(self) -> dict[str, ModuleType]:
        if self.modules:
            return load_tool_modules(self.modules)
        return load_tool_package(self.package or DEFAULT_TOOL_PACKAGE)


class ServerConfig(BaseModel):
    """Top-level server configuration."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = "funcmcp"
    version: str = __version__
    tools: ToolSource = Field(default_factory=ToolSource)
    telemetry: TelemetrySettings | None = None


class ConfigLoader:
    """Load and validate a YAML config file into a :class:`ServerConfig`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerConfig:
        """Read YAML, interpolate env vars, and validate.

        ``${VAR}`` / ``$VAR`` references are expanded with
        :func:`os.path.expandvars` before parsing.  An empty file yields the
        default configuration.

        Raises:
            ConfigError: On read errors, YAML errors or validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Server config must be a mapping")

        try:
            return ServerConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
