"""Server settings.

Instantiating ``Settings()`` reads environment variables with the prefix
TINYMCP_. For example, TINYMCP_SERVER_NAME=my-server sets server_name.
Only ``serve()`` does that; a ``Server`` built directly takes its settings
from its arguments alone.
"""

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tinymcp.types.base import DEFAULT_PROTOCOL_VERSION


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TINYMCP_",
        extra="ignore",
    )

    # Server identity
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    server_name: str = "tinymcp-server"
    server_version: str = "1.0.0"
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # tool settings
    warn_on_duplicate_tools: bool = True
