"""Minimum amount of base models to represent the types from JSON-RPC used by MCP."""

from enum import Enum
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr

JSONRPC_VERSION: Final[str] = "2.0"

PARSE_ERROR: Final[int] = -32700
INVALID_REQUEST: Final[int] = -32600
METHOD_NOT_FOUND: Final[int] = -32601
INVALID_PARAMS: Final[int] = -32602
INTERNAL_ERROR: Final[int] = -32603

RequestId = StrictInt | StrictFloat | StrictStr


class ErrorKind(Enum):
    """The error conditions a server reports, with their code and default message."""

    INVALID_JSON = (PARSE_ERROR, "Invalid JSON")
    INVALID_REQUEST = (INVALID_REQUEST, "Invalid request")
    METHOD_NOT_FOUND = (METHOD_NOT_FOUND, "Method not found")
    INVALID_PARAMS = (INVALID_PARAMS, "Invalid params")
    INTERNAL = (INTERNAL_ERROR, "Internal error")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def default_message(self) -> str:
        return self.value[1]


class JSONRPCBase(BaseModel):
    """Base class for all JSON-RPC messages."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION


class JSONRPCRequest(BaseModel):
    """A request as read off the wire.

    ``id`` may be missing or ``null``; both are answered with ``id: null``.
    The ``jsonrpc`` member is not enforced.
    """

    model_config = ConfigDict(extra="allow")

    jsonrpc: str | None = None
    id: RequestId | None = None
    method: StrictStr
    params: dict[str, Any] | None = None


class ErrorData(BaseModel):
    """Error information in a JSON-RPC error response."""

    code: int
    message: str

    @classmethod
    def for_kind(cls, kind: ErrorKind, message: str | None = None) -> "ErrorData":
        return cls(code=kind.code, message=message if message is not None else kind.default_message)


class JSONRPCResultResponse(JSONRPCBase):
    """A successful (non-error) response to a request."""

    id: RequestId | None = None
    result: dict[str, Any]


class JSONRPCErrorResponse(JSONRPCBase):
    """A response to a request that indicates an error occurred."""

    id: RequestId | None = None
    error: ErrorData


JSONRPCResponse = JSONRPCResultResponse | JSONRPCErrorResponse
