"""tinymcp Server - request dispatch for initialize, tools/list and tools/call.

No I/O here. ``Server.handle`` turns one decoded JSON-RPC request into one
decoded response and never raises; transports own reading and writing.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from typing import Any

import anyio
from pydantic import BaseModel, ValidationError

from tinymcp.exceptions import InvalidArgumentsError, McpError, MissingArgumentsError
from tinymcp.settings import Settings
from tinymcp.tools import Tool, ToolRegistry
from tinymcp.types.common import Implementation, ServerCapabilities
from tinymcp.types.content import TextContent
from tinymcp.types.initialize import InitializeResult
from tinymcp.types.json_rpc import (
    ErrorData,
    ErrorKind,
    JSONRPCErrorResponse,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
    RequestId,
)
from tinymcp.types.tools import CallToolRequestParams, CallToolResult, ListToolsResult
from tinymcp.utilities.logging import get_logger

logger = get_logger(__name__)

RequestHandler = Callable[[JSONRPCRequest], BaseModel]


class Server:
    """Serves a fixed set of tools.

    Args:
        *tools: Tool types to register, in listing order
        protocol_version: Protocol version reported by ``initialize``
        server_name: Name reported in ``serverInfo``
        server_version: Version reported in ``serverInfo``
        capabilities: Capabilities reported by ``initialize``
        warn_on_duplicate_tools: Whether to log a warning when two tools share a name
        settings: Base settings; explicit arguments above take precedence

    Example:
        ```python
        class Add(Tool, name="add", description="Adds two numbers"):
            def call(self, x, y):
                return x + y

        Add.declare_required("x", "number", "First number")
        Add.declare_required("y", "number", "Second number")

        server = Server(Add, server_name="calculator")
        server.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        ```
    """

    def __init__(
        self,
        *tools: type[Tool],
        protocol_version: str | None = None,
        server_name: str | None = None,
        server_version: str | None = None,
        capabilities: ServerCapabilities | dict[str, Any] | None = None,
        warn_on_duplicate_tools: bool | None = None,
        settings: Settings | None = None,
    ) -> None:
        if isinstance(capabilities, ServerCapabilities):
            capabilities = capabilities.model_dump(by_alias=True, exclude_none=True)
        overrides = {
            key: value
            for key, value in {
                "protocol_version": protocol_version,
                "server_name": server_name,
                "server_version": server_version,
                "capabilities": capabilities,
                "warn_on_duplicate_tools": warn_on_duplicate_tools,
            }.items()
            if value is not None
        }
        if settings is None:
            # no environment lookup here; serve() reads it at the entry point
            self.settings = Settings.model_validate(overrides)
        else:
            self.settings = settings.model_copy(update=overrides)

        self._tools = ToolRegistry(tools, warn_on_duplicate_tools=self.settings.warn_on_duplicate_tools)
        self._request_handlers: dict[str, RequestHandler] = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_list_tools,
            "tools/call": self._handle_call_tool,
        }

    @property
    def name(self) -> str:
        return self.settings.server_name

    @property
    def version(self) -> str:
        return self.settings.server_version

    @property
    def tools(self) -> ToolRegistry:
        return self._tools

    def handle(self, message: Any) -> dict[str, Any]:
        """Handle one decoded request and return the decoded response."""
        try:
            request = JSONRPCRequest.model_validate(message)
        except ValidationError:
            logger.warning("Invalid request: %r", message)
            response: JSONRPCResponse = self.error_for(_salvage_id(message), ErrorKind.INVALID_REQUEST)
        else:
            response = self.handle_message(request)
        return response.model_dump(by_alias=True)

    def handle_message(self, request: JSONRPCRequest) -> JSONRPCResponse:
        """Dispatch a validated request to the handler for its method."""
        logger.debug(f"Handling {request.method} (id={request.id!r})")
        handler = self._request_handlers.get(request.method)
        if handler is None:
            return self.error_for(request.id, ErrorKind.METHOD_NOT_FOUND)
        try:
            result = handler(request).model_dump(by_alias=True)
        except McpError as e:
            return JSONRPCErrorResponse(id=request.id, error=e.error)
        except Exception as e:
            logger.exception("Handler error for %s", request.method)
            return self.error_for(request.id, ErrorKind.INTERNAL, _describe(e))
        return JSONRPCResultResponse(id=request.id, result=result)

    def error_for(
        self,
        request_id: RequestId | None,
        kind: ErrorKind,
        message: str | None = None,
    ) -> JSONRPCErrorResponse:
        return JSONRPCErrorResponse(id=request_id, error=ErrorData.for_kind(kind, message))

    def _handle_initialize(self, request: JSONRPCRequest) -> InitializeResult:
        return InitializeResult(
            protocol_version=self.settings.protocol_version,
            capabilities=self.settings.capabilities,
            server_info=Implementation(name=self.name, version=self.version),
        )

    def _handle_list_tools(self, request: JSONRPCRequest) -> ListToolsResult:
        return ListToolsResult(tools=[definition.to_wire_schema() for definition in self._tools.list_definitions()])

    def _handle_call_tool(self, request: JSONRPCRequest) -> CallToolResult:
        try:
            params = CallToolRequestParams.model_validate(request.params or {})
        except ValidationError as e:
            raise McpError.of(ErrorKind.INVALID_PARAMS) from e

        tool = self._tools.get(params.name)
        if tool is None:
            raise McpError.of(ErrorKind.INVALID_PARAMS, f"Unknown tool: {params.name}")

        try:
            arguments = type(tool).definition.bind_arguments(params.arguments)
        except MissingArgumentsError as e:
            logger.warning(str(e))
            raise McpError.of(ErrorKind.INTERNAL, str(e)) from e
        except InvalidArgumentsError as e:
            raise McpError.of(ErrorKind.INVALID_PARAMS, str(e)) from e

        try:
            result = tool.call(**arguments)
        except McpError:
            raise
        except Exception as e:
            logger.exception(f"Error executing tool {params.name}")
            raise McpError.of(ErrorKind.INTERNAL, _describe(e)) from e

        return CallToolResult(content=_to_content(result))

    def run(self) -> None:
        """Serve over stdin/stdout until stdin is closed."""
        from tinymcp.transport.stdio import run_stdio

        anyio.run(run_stdio, self)


def _to_content(result: Any) -> list[Any]:
    # sequences are taken as ready-made content items; str is not one
    if isinstance(result, list | tuple):
        return [
            item.model_dump(by_alias=True, exclude_none=True) if isinstance(item, BaseModel) else item
            for item in result
        ]
    return [TextContent(text=str(result)).model_dump(by_alias=True)]


def _describe(error: BaseException) -> str:
    return "".join(traceback.format_exception(error)).rstrip()


def _salvage_id(message: Any) -> RequestId | None:
    if not isinstance(message, dict):
        return None
    request_id = message.get("id")
    if isinstance(request_id, str | int | float) and not isinstance(request_id, bool):
        return request_id
    return None
