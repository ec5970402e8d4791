"""Expand user path (~/...) and environment variables to an absolute path."""

import os
from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """Expand user path (~/...) to absolute path."""
    return Path(os.path.expandvars(str(path))).expanduser().resolve()
