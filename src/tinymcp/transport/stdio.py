"""Stdio Server Transport Module

Reads one JSON-RPC request per line from stdin and writes one response per
line to stdout. Requests are handled one at a time, in order; a tool call
runs inline, so a tool that blocks also blocks the loop.

Example:
    ```python
    server = Server(Add, Echo)
    anyio.run(run_stdio, server)
    ```
"""

from __future__ import annotations

import sys
from io import TextIOWrapper
from typing import Any, BinaryIO

import anyio
import pydantic_core

from tinymcp.server import Server
from tinymcp.settings import Settings
from tinymcp.tools import Tool
from tinymcp.types.json_rpc import ErrorKind
from tinymcp.utilities.logging import configure_logging, get_logger

logger = get_logger(__name__)


class _NonClosingTextIOWrapper(TextIOWrapper):
    """Text wrapper that never closes the underlying binary stream.

    The server should not close the process' real stdin/stdout handles when
    the loop winds down.
    """

    def close(self) -> None:
        if self.closed:
            return

        if self.writable():
            self.flush()


def _wrap_process_stdio(binary_stream: BinaryIO) -> anyio.AsyncFile[str]:
    return anyio.wrap_file(_NonClosingTextIOWrapper(binary_stream, encoding="utf-8", errors="replace"))


def _encode(server: Server, response: dict[str, Any]) -> str:
    try:
        return pydantic_core.to_json(response).decode()
    except pydantic_core.PydanticSerializationError as e:
        logger.exception("Could not encode response")
        error = server.error_for(response.get("id"), ErrorKind.INTERNAL, str(e))
        return error.model_dump_json(by_alias=True)


async def run_stdio(
    server: Server,
    stdin: anyio.AsyncFile[str] | None = None,
    stdout: anyio.AsyncFile[str] | None = None,
) -> None:
    """Run ``server`` over stdin/stdout (newline-delimited JSON-RPC) until EOF."""
    # Encoding of stdin/stdout as text streams on python is platform-dependent,
    # so we re-wrap the underlying binary stream to ensure UTF-8.
    # Undecodable bytes become U+FFFD and the line fails as Invalid JSON.
    if not stdin:
        stdin = _wrap_process_stdio(sys.stdin.buffer)
    if not stdout:
        stdout = _wrap_process_stdio(sys.stdout.buffer)

    logger.info(f"Serving {len(server.tools)} tool(s) as {server.name} {server.version}")
    async for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            continue

        try:
            message = pydantic_core.from_json(line)
        except ValueError:
            logger.warning("Invalid JSON: %s", line)
            response = server.error_for(None, ErrorKind.INVALID_JSON).model_dump(by_alias=True)
        else:
            response = server.handle(message)

        await stdout.write(_encode(server, response) + "\n")
        await stdout.flush()


def serve(
    *tools: type[Tool],
    settings: Settings | None = None,
    **kwargs: Any,
) -> None:
    """Build a ``Server`` for ``tools`` and serve it over stdio.

    Settings not given are read from ``TINYMCP_*`` environment variables.
    Keyword arguments are passed on to ``Server`` and take precedence.
    """
    if settings is None:
        settings = Settings()
    server = Server(*tools, settings=settings, **kwargs)
    configure_logging(server.settings.log_level)
    server.run()
