"""Per-server session state for the MCP handshake."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from funcmcp.protocol.errors import NotInitializedError


@dataclass
class ServerSession:
    """Server identity plus the one-way ``initialized`` flag.

    The flag moves from ``False`` to ``True`` on the first successful
    ``initialize`` and never goes back.  Repeating ``initialize`` only
    refreshes what the client declared.
    """

    name: str
    version: str
    initialized: bool = False
    client_protocol_version: str | None = None
    client_info: dict[str, Any] = field(default_factory=dict)

    def mark_initialized(
        self,
        *,
        protocol_version: str | None = None,
        client_info: dict[str, Any] | None = None,
    ) -> None:
        self.client_protocol_version = protocol_version
        self.client_info = dict(client_info or {})
        self.initialized = True

    def require_initialized(self) -> None:
        """Raise :class:`NotInitializedError` unless the handshake completed."""
        if not self.initialized:
            raise NotInitializedError()
