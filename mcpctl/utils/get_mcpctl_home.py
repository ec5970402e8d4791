"""Resolve the mcpctl home directory."""

import os
from pathlib import Path


def get_mcpctl_home() -> Path:
    """Get mcpctl home directory based on MCPCTL_HOME or default to ~/.mcpctl."""
    home_env = os.environ.get("MCPCTL_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".mcpctl"
