"""tinymcp - expose Python tools to MCP clients over line-delimited JSON-RPC."""

from tinymcp.exceptions import (
    DefinitionSealedError,
    DuplicateParameterError,
    InvalidArgumentsError,
    McpError,
    SchemaError,
    TinyMCPError,
)
from tinymcp.schema import Definition, ParamType, Prop
from tinymcp.server import Server
from tinymcp.settings import Settings
from tinymcp.tools import Tool, ToolBuilder, ToolRegistry
from tinymcp.transport.stdio import run_stdio, serve
from tinymcp.types.content import AudioContent, ImageContent, OpaqueContent, ResourceContent, TextContent
from tinymcp.types.json_rpc import ErrorKind

__all__ = [
    "AudioContent",
    "Definition",
    "DefinitionSealedError",
    "DuplicateParameterError",
    "ErrorKind",
    "ImageContent",
    "InvalidArgumentsError",
    "McpError",
    "OpaqueContent",
    "ParamType",
    "Prop",
    "ResourceContent",
    "SchemaError",
    "Server",
    "Settings",
    "TextContent",
    "TinyMCPError",
    "Tool",
    "ToolBuilder",
    "ToolRegistry",
    "run_stdio",
    "serve",
]
