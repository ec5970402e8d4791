"""Output schemas for server commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServerInstallOutput(BaseOutputSchema):
    """Output schema for install command."""

    success: bool = Field(..., description="Whether the server entry was written")
    qualified_name: str = Field(..., description="Registry id of the server")
    server_name: str = Field(..., description="Key used in the client's mcpServers map")
    client: str = Field(..., description="Target client name")
    config_path: str = Field(..., description="Client configuration file, empty string if unresolved")
    remote: bool = Field(..., description="Whether the server is reached by URL")
    restarted: bool = Field(..., description="Whether the client application was restarted")


class ServerUninstallOutput(BaseOutputSchema):
    """Output schema for uninstall command."""

    success: bool = Field(..., description="Whether the server entry was removed")
    qualified_name: str = Field(..., description="Registry id of the server")
    server_name: str = Field(..., description="Key removed from the client's mcpServers map")
    client: str = Field(..., description="Target client name")
    config_path: str = Field(..., description="Client configuration file, empty string if unresolved")
    restarted: bool = Field(..., description="Whether the client application was restarted")


class ServerInspectOutput(BaseOutputSchema):
    """Output schema for inspect command.

    Output structure:
    - server: dict[str, Any] - registry metadata, empty dict on failure
    - connections: list[dict] - one summary per connection (type, url, required config keys, runtimes)
    """

    qualified_name: str = Field(..., description="Registry id of the server")
    server: dict[str, Any] = Field(..., description="Registry metadata, empty dict on failure")
    connections: list[dict[str, Any]] = Field(..., description="Per-connection summaries")
    remote: bool = Field(..., description="Whether the server is reached by URL")


register_output_schema("server", "install", ServerInstallOutput)
register_output_schema("server", "uninstall", ServerUninstallOutput)
register_output_schema("server", "inspect", ServerInspectOutput)
