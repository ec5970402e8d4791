"""Output schemas for client commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ClientListOutput(BaseOutputSchema):
    """Output schema for list clients command."""

    clients: list[dict[str, Any]] = Field(..., description="Supported clients with name, label, path and exists flag")
    count: int = Field(..., description="Number of supported clients")


class ClientServersOutput(BaseOutputSchema):
    """Output schema for list servers command."""

    client: str = Field(..., description="Client name")
    config_path: str = Field(..., description="Client configuration file, empty string if unresolved")
    servers: list[str] = Field(..., description="Server names configured for the client")
    count: int = Field(..., description="Number of configured servers")


register_output_schema("client", "list", ClientListOutput)
register_output_schema("client", "servers", ClientServersOutput)
