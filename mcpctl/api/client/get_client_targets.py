"""Table of supported clients and their per-platform config locations."""

import os
from pathlib import Path

from ...utils.expand_path import expand_path
from ..runtime._detect_os import detect_os
from .ClientTarget import ClientTarget

VALID_CLIENTS = ("claude", "cline", "roo-cline", "windsurf", "witsy", "enconvo", "cursor")


def _app_data_dir(home: Path, system: str, appdata: str | None) -> Path:
    if system == "windows":
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if system == "macos":
        return home / "Library" / "Application Support"
    return home / ".config"


def get_client_targets(
    home: Path | None = None,
    system: str | None = None,
    appdata: str | None = None,
    overrides: dict[str, str] | None = None,
) -> dict[str, ClientTarget]:
    """Build the client table.

    Args:
        home: Home directory (defaults to Path.home())
        system: "macos", "windows" or "linux" (defaults to the running OS)
        appdata: Windows %APPDATA% (defaults to the environment)
        overrides: client name -> config path replacing the built-in location

    Raises:
        ValueError: If an override names an unknown client
    """
    home = home if home is not None else Path.home()
    system = system or detect_os()
    if appdata is None:
        appdata = os.environ.get("APPDATA")

    base = _app_data_dir(home, system, appdata)
    vscode_storage = base / "Code" / "User" / "globalStorage"

    targets = {
        "claude": ClientTarget("claude", base / "Claude" / "claude_desktop_config.json", "Claude Desktop", "Claude"),
        "cline": ClientTarget(
            "cline",
            vscode_storage / "saoudrizwan.claude-dev" / "settings" / "cline_mcp_settings.json",
            "Cline",
        ),
        "roo-cline": ClientTarget(
            "roo-cline",
            vscode_storage / "rooveterinaryinc.roo-cline" / "settings" / "cline_mcp_settings.json",
            "Roo Cline",
        ),
        "windsurf": ClientTarget("windsurf", home / ".codeium" / "windsurf" / "mcp_config.json", "Windsurf", "Windsurf"),
        "witsy": ClientTarget("witsy", base / "Witsy" / "settings.json", "Witsy", "Witsy"),
        "enconvo": ClientTarget("enconvo", home / ".config" / "enconvo" / "mcp_config.json", "Enconvo", "EnConvo"),
        "cursor": ClientTarget("cursor", home / ".cursor" / "mcp.json", "Cursor", "Cursor"),
    }

    for name, path in (overrides or {}).items():
        key = name.lower()
        if key not in targets:
            raise ValueError(f"Unknown client in overrides: {name!r}. Valid clients: {', '.join(VALID_CLIENTS)}")
        current = targets[key]
        targets[key] = ClientTarget(current.name, expand_path(path), current.label, current.app_name)

    return targets
