"""Custom exceptions for tinymcp."""

from tinymcp.types.json_rpc import ErrorData, ErrorKind


class TinyMCPError(Exception):
    """Base error for tinymcp."""


class SchemaError(TinyMCPError):
    """Error in declaring a tool's definition."""


class DuplicateParameterError(SchemaError):
    """A parameter with the same name is already declared on the definition."""

    def __init__(self, tool_name: str | None, param_name: str):
        super().__init__(f"Parameter {param_name!r} is already declared on tool {tool_name!r}")
        self.tool_name = tool_name
        self.param_name = param_name


class DefinitionSealedError(SchemaError):
    """The definition is in use by a tool instance and can no longer change."""


class InvalidArgumentsError(TinyMCPError):
    """Error in validating the arguments of a tool call."""


class MissingArgumentsError(InvalidArgumentsError):
    """A required argument of a tool call was not supplied."""


class McpError(TinyMCPError):
    """Exception carrying a JSON-RPC error to report back to the client.

    Attributes:
        error: The ErrorData to send in the error response
    """

    error: ErrorData

    def __init__(self, error: ErrorData):
        super().__init__(error.message)
        self.error = error

    @classmethod
    def of(cls, kind: ErrorKind, message: str | None = None) -> "McpError":
        return cls(ErrorData.for_kind(kind, message))
