"""Write a client's MCP configuration document."""

import json
from typing import Any

from ...utils.verbose import verbose
from .ClientTarget import ClientTarget
from .resolve_client import resolve_client


def write_config(config: dict[str, Any], client: "str | ClientTarget") -> None:
    """Write ``config`` over the current file contents.

    Top-level keys already on disk but absent from ``config`` are kept;
    keys present in ``config`` replace what is on disk.
    """
    target = resolve_client(client)
    path = target.path
    path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, Any] = {}
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as fh:
                loaded = json.load(fh)
            if isinstance(loaded, dict):
                existing = loaded
        except (json.JSONDecodeError, UnicodeDecodeError):
            existing = {}

    merged = {**existing, **config}
    verbose(f"Writing configuration for client {target.name} to {path}")
    with path.open("w", encoding="utf-8") as fh:
        json.dump(merged, fh, indent=2)
        fh.write("\n")
