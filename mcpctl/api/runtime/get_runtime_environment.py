"""Environment handed to launched servers."""

from mcp.client.stdio import get_default_environment


def get_runtime_environment(base_env: dict[str, str] | None = None) -> dict[str, str]:
    """The MCP SDK's safe default environment overlaid with ``base_env``."""
    return {**get_default_environment(), **(base_env or {})}
