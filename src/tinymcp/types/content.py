"""MCP Content Types - Content items returned from tool calls.

Tools may return these models or plain dicts; both end up in the
``content`` array of a ``tools/call`` result.
"""

import base64
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field

from tinymcp.types.base import MCPModel


class TextContent(MCPModel):
    """Text provided to or from an LLM."""

    type: Literal["text"] = "text"
    text: str


class _BinaryContent(MCPModel):
    data: str  # base64 encoded
    mime_type: Annotated[str, Field(alias="mimeType")]

    @classmethod
    def from_bytes(cls, payload: bytes, mime_type: str):
        return cls(data=base64.b64encode(payload).decode("ascii"), mime_type=mime_type)

    @classmethod
    def from_file(cls, path: str | Path, mime_type: str):
        """Read ``path`` and wrap its bytes as base64 content."""
        return cls.from_bytes(Path(path).read_bytes(), mime_type)


class ImageContent(_BinaryContent):
    """An image provided to or from an LLM."""

    type: Literal["image"] = "image"


class AudioContent(_BinaryContent):
    """Audio provided to or from an LLM."""

    type: Literal["audio"] = "audio"


class ResourceContent(MCPModel):
    """A reference to a resource, optionally with inline text."""

    type: Literal["resource"] = "resource"
    uri: str
    text: str | None = None


class OpaqueContent(MCPModel):
    """Any other content kind. Every field besides ``type`` is kept as-is."""

    type: str

