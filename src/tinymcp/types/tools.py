"""MCP Tools Types - Types for tool listing and invocation."""

from typing import Annotated, Any, Literal

from pydantic import Field, StrictStr

from tinymcp.types.base import MCPModel


class JsonSchema(MCPModel):
    """A JSON Schema object."""

    type: Literal["object"] = "object"
    properties: dict[str, Any] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class Tool(MCPModel):
    """Definition of a tool the server provides."""

    name: str
    description: str | None = None
    input_schema: Annotated[JsonSchema, Field(alias="inputSchema")]


class ListToolsResult(MCPModel):
    """Server's response to a tools/list request."""

    tools: list[dict[str, Any]]


class CallToolRequestParams(MCPModel):
    """Parameters for tools/call request."""

    name: StrictStr
    arguments: dict[str, Any] | None = None


class CallToolResult(MCPModel):
    """Server's response to a tools/call request."""

    content: list[Any]
