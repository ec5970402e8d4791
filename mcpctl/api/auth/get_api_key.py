import os

from ..config.McpctlConfig import McpctlConfig

API_KEY_ENV_VAR = "MCPCTL_API_KEY"


def get_api_key() -> str | None:
    """Saved API key: MCPCTL_API_KEY wins over the config file."""
    env_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if env_key:
        return env_key
    return McpctlConfig.load().api_key or None
