"""Top-level mcpctl configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_mcpctl_home import get_mcpctl_home
from .LogConfig import LogConfig
from .RegistryConfig import RegistryConfig


class McpctlConfig(BaseModel):
    """Top-level configuration, stored as $MCPCTL_HOME/config.json."""

    model_config = ConfigDict(extra="forbid")

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    api_key: str | None = Field(default=None, description="Saved registry API key")
    clients: dict[str, str] = Field(
        default_factory=dict,
        description="Per-client overrides of the configuration file path",
    )
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mcpctl home directory based on MCPCTL_HOME or default to ~/.mcpctl."""
        return get_mcpctl_home()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "McpctlConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
