"""Load a client's MCP configuration document."""

import json
import logging
import shutil
from typing import Any

from ...utils.verbose import verbose
from .ClientTarget import ClientTarget
from .resolve_client import resolve_client

logger = logging.getLogger(__name__)


def read_config(client: "str | ClientTarget") -> dict[str, Any]:
    """Read the document, always returning a dict with an ``mcpServers`` mapping.

    A missing file reads as empty. A file that is not a JSON object is copied
    to ``<file>.bak`` and read as empty, so the next write starts clean.
    """
    target = resolve_client(client)
    path = target.path
    verbose(f"Reading configuration for client {target.name} from {path}")

    if not path.exists():
        verbose("Configuration file not found, starting from an empty configuration")
        return {"mcpServers": {}}

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError("Config must be a JSON object")
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
        backup = path.with_suffix(path.suffix + ".bak")
        shutil.copy(path, backup)
        logger.warning("Invalid client config %s (%s); backed up to %s", path, e, backup)
        return {"mcpServers": {}}

    if not isinstance(data.get("mcpServers"), dict):
        data["mcpServers"] = {}
    return data
