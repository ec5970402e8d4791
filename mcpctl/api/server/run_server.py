"""Launch a stdio server in the foreground."""

import json
import logging
import subprocess

from ...display import get_display
from ...utils.verbose import verbose
from ..auth.get_api_key import get_api_key
from ..config.McpctlConfig import McpctlConfig
from ..registry.ConnectionInfo import ConnectionInfo
from ..registry.RegistryClient import RegistryClient
from ..runtime import check_installed
from ..runtime.get_runtime_environment import get_runtime_environment
from ..runtime.is_required import is_bun_required, is_uv_required
from .parse_config_json import parse_config_json

logger = logging.getLogger(__name__)


def _config_env(config: dict) -> dict[str, str]:
    """Expose config values to the child as environment variables."""
    env: dict[str, str] = {}
    for key, value in config.items():
        env[str(key)] = value if isinstance(value, str) else json.dumps(value)
    return env


def _warn_missing_runtimes(connection: ConnectionInfo) -> None:
    # stdin/stdout belong to the client's JSON-RPC stream, so never prompt here
    missing = []
    if is_uv_required(connection) and not check_installed.check_uv_installed():
        missing.append("UV")
    if is_bun_required(connection) and not check_installed.check_bun_installed():
        missing.append("Bun")
    for name in missing:
        logger.warning("%s is not installed; launching %s anyway", name, connection.command)
        get_display("cli").warning(f"{name} is not installed. The server might fail to launch.")


def run_server(server_id: str, config_json: str | None = None, api_key: str | None = None) -> int:
    """Resolve the server, then run its stdio command with inherited stdin/stdout.

    Nothing is read from stdin or written to stdout before the child starts.

    Returns:
        The child's exit code

    Raises:
        ValueError: If no API key is known or the server has no runnable stdio connection
        RegistryError: If the registry lookup fails
    """
    config = parse_config_json(config_json)
    key = api_key or get_api_key()
    if not key:
        raise ValueError("No API key available; pass --key or run 'mcpctl install' first")
    server = RegistryClient.from_config(McpctlConfig.load(), api_key=key).get_server(server_id)

    connection = next((c for c in server.connections if c.type == "stdio"), None)
    if connection is None:
        raise ValueError(f"Server '{server.qualified_name}' is remote-only and cannot be run locally")
    if not connection.command:
        raise ValueError(f"Server '{server.qualified_name}' does not publish a launch command")

    _warn_missing_runtimes(connection)

    env = get_runtime_environment({**connection.env, **_config_env(config)})
    argv = [connection.command, *connection.args]
    verbose(f"Launching {' '.join(argv)}")
    logger.info("Running %s: %s", server.qualified_name, argv[0])
    try:
        completed = subprocess.run(argv, env=env, check=False)
    except FileNotFoundError as e:
        raise ValueError(f"Launch command not found: {connection.command}") from e
    return completed.returncode
