"""MCP Common Types - Shared types used across the protocol."""

from typing import Any

from tinymcp.types.base import MCPModel


class Implementation(MCPModel):
    """Describes the name and version of an MCP implementation."""

    name: str
    version: str


class ServerCapabilities(MCPModel):
    """Capabilities that a server may support.

    Only ``tools`` is ever advertised by default; anything else a caller
    configures is passed through as an extra field.
    """

    tools: dict[str, Any] | None = None
