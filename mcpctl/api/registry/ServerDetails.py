"""Registry metadata for one server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .ConnectionInfo import ConnectionInfo


class ServerDetails(BaseModel):
    """Server entry returned by ``GET /servers/{qualifiedName}``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    qualified_name: str = Field(alias="qualifiedName")
    display_name: str = Field(default="", alias="displayName")
    description: str = ""
    remote: bool | None = None
    homepage: str | None = None
    connections: list[ConnectionInfo] = Field(default_factory=list)
    tools: list[dict[str, Any]] | None = None
