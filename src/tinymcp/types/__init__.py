"""Pydantic models for the subset of the MCP wire format tinymcp speaks."""

from tinymcp.types.base import DEFAULT_PROTOCOL_VERSION, MCPModel
from tinymcp.types.common import Implementation, ServerCapabilities
from tinymcp.types.content import (
    AudioContent,
    ImageContent,
    OpaqueContent,
    ResourceContent,
    TextContent,
)
from tinymcp.types.initialize import InitializeResult
from tinymcp.types.json_rpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ErrorData,
    ErrorKind,
    JSONRPCErrorResponse,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
    RequestId,
)
from tinymcp.types.tools import CallToolRequestParams, CallToolResult, JsonSchema, ListToolsResult, Tool

__all__ = [
    "DEFAULT_PROTOCOL_VERSION",
    "MCPModel",
    "Implementation",
    "ServerCapabilities",
    "AudioContent",
    "ImageContent",
    "OpaqueContent",
    "ResourceContent",
    "TextContent",
    "InitializeResult",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JSONRPC_VERSION",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "ErrorData",
    "ErrorKind",
    "JSONRPCErrorResponse",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "JSONRPCResultResponse",
    "RequestId",
    "CallToolRequestParams",
    "CallToolResult",
    "JsonSchema",
    "ListToolsResult",
    "Tool",
]
