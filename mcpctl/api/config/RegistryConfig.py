"""Registry connection settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REGISTRY_URL = "https://registry.smithery.ai"


class RegistryConfig(BaseModel):
    """Where to resolve servers and how long to wait for it."""

    model_config = ConfigDict(extra="forbid")

    url: str = Field(default=DEFAULT_REGISTRY_URL, description="Base URL of the server registry API")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"registry url must be http(s), got {v!r}")
        return v.rstrip("/")
