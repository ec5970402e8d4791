"""One way of reaching a server, as published by the registry."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConnectionInfo(BaseModel):
    """A stdio or http connection entry.

    Field names follow Python conventions; the registry's camelCase keys are
    accepted as aliases.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(description="Connection type: 'stdio' or 'http'")
    stdio_function: str | None = Field(default=None, alias="stdioFunction")
    command: str | None = Field(default=None, description="Executable for stdio launches")
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    deployment_url: str | None = Field(default=None, alias="deploymentUrl")
    config_schema: dict[str, Any] = Field(default_factory=dict, alias="configSchema")
    example_config: dict[str, Any] | None = Field(default=None, alias="exampleConfig")
    published: bool | None = None

    @property
    def launch_text(self) -> str:
        """Text describing how a stdio server is started."""
        if self.stdio_function:
            return self.stdio_function
        return " ".join([self.command or "", *self.args]).strip()

    def required_config_keys(self) -> list[str]:
        """Names of config properties the schema marks as required."""
        required = self.config_schema.get("required") or []
        return [str(key) for key in required]
