"""Build the launch entry written into a client's mcpServers map."""

import base64
import json
from typing import Any
from urllib.parse import urlencode

from ..registry.ConnectionInfo import ConnectionInfo
from ..registry.ServerDetails import ServerDetails
from ..runtime.is_remote import is_remote
from ._resolve_command import _resolve_command


def _remote_url(deployment_url: str, config: dict[str, Any], api_key: str | None) -> str:
    params: dict[str, str] = {}
    if config:
        encoded = json.dumps(config, separators=(",", ":")).encode("utf-8")
        params["config"] = base64.b64encode(encoded).decode("ascii")
    if api_key:
        params["api_key"] = api_key
    url = deployment_url.rstrip("/") + "/mcp"
    return f"{url}?{urlencode(params)}" if params else url


def build_server_config(
    server: ServerDetails,
    connection: ConnectionInfo,
    config: dict[str, Any],
    api_key: str | None = None,
    command_override: str | None = None,
) -> dict[str, Any]:
    """Remote servers get ``{"url": ...}``; local ones launch through ``mcpctl run``."""
    if connection.type == "http" and connection.deployment_url and is_remote(server):
        return {"url": _remote_url(connection.deployment_url, config, api_key)}

    command, prefix = _resolve_command(command_override)
    args = [*prefix, "run", server.qualified_name]
    if config:
        args += ["--config", json.dumps(config, separators=(",", ":"))]
    if api_key:
        args += ["--key", api_key]
    return {"command": command, "args": args}
