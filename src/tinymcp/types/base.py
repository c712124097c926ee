"""MCP Base Types - Core type definitions for MCP protocol."""

from typing import Final

from pydantic import BaseModel, ConfigDict

DEFAULT_PROTOCOL_VERSION: Final[str] = "2024-11-05"


class MCPModel(BaseModel):
    """Base class for all MCP domain types. Allows extra fields for forward compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
