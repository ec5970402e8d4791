"""User configuration for mcpctl."""

from .LogConfig import LogConfig
from .McpctlConfig import McpctlConfig
from .RegistryConfig import RegistryConfig

__all__ = ["LogConfig", "McpctlConfig", "RegistryConfig"]
