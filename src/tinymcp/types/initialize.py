"""MCP Initialize Types - Types for the initialize handshake."""

from typing import Annotated, Any

from pydantic import Field

from tinymcp.types.base import MCPModel
from tinymcp.types.common import Implementation


class InitializeResult(MCPModel):
    """Server's response to an initialize request."""

    protocol_version: Annotated[str, Field(alias="protocolVersion")]
    capabilities: dict[str, Any]
    server_info: Annotated[Implementation, Field(alias="serverInfo")]
