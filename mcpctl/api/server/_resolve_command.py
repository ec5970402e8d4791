import shutil
import sys
from pathlib import Path


def _resolve_command(command_override: str | None = None) -> tuple[str, list[str]]:
    """Determine the executable (and leading args) that launch this CLI."""
    if command_override:
        return str(Path(command_override).expanduser()), []

    resolved = shutil.which("mcpctl")
    if resolved:
        return resolved, []

    # Fall back to the current interpreter + module path.
    return sys.executable, ["-m", "mcpctl"]
