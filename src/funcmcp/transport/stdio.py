"""Stdio adapter: one request body per line in, one response line out.

This is the transport-side collaborator of :class:`McpServer`: it only frames
request bodies and never looks inside them.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from funcmcp.server.server import McpServer

logger = logging.getLogger(__name__)


class StdioServer:
    """Serve an :class:`McpServer` over newline-delimited JSON.

    Blank lines are skipped.  Every other line is handed to
    ``server.handle()`` and its response written as a single JSON line, in
    request order.  Serving stops at end of input.
    """

    def __init__(
        self,
        server: McpServer,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
    ) -> None:
        self._server = server
        self._reader = reader or sys.stdin
        self._writer = writer or sys.stdout

    async def serve(self) -> int:
        """Serve until EOF and return the number of requests handled."""
        handled = 0
        while True:
            line = await asyncio.to_thread(self._reader.readline)
            if not line:
                break
            body = line.strip()
            if not body:
                continue

            response = await self._server.handle(body)
            self._writer.write(response.to_json() + "\n")
            self._writer.flush()
            handled += 1

        logger.debug("Input closed after %d request(s)", handled)
        return handled
