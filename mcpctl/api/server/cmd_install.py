"""Install MCP server command."""

import logging
from collections.abc import Iterator

import click

from .._output_schemas.server import ServerInstallOutput
from ..auth.ensure_api_key import ensure_api_key
from ..client.get_server_name import get_server_name
from ..client.install_server_for_client import install_server_for_client
from ..client.resolve_client import resolve_client
from ..config.McpctlConfig import McpctlConfig
from ..registry.choose_connection import choose_connection
from ..registry.RegistryClient import RegistryClient
from ..registry.RegistryError import RegistryError
from ..runtime.check_and_notify_remote_server import check_and_notify_remote_server
from ..runtime.ensure_installed import ensure_bun_installed, ensure_uv_installed
from ..StageResult import StageResult
from .build_server_config import build_server_config
from .collect_config_values import collect_config_values
from .parse_config_json import parse_config_json

logger = logging.getLogger(__name__)


def cmd_install(
    package: str,
    client: str,
    config_json: str | None = None,
    api_key: str | None = None,
    restart_prompt: bool = True,
) -> StageResult:
    """Install a registry server into a client's configuration.

    Args:
        package: Qualified server name in the registry
        client: Target client name
        config_json: JSON object with server configuration values
        api_key: Registry API key; used as-is and never saved
        restart_prompt: Offer to restart the client afterwards

    Returns:
        StageResult with installation status
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        state = {"config_path": "", "client": client, "remote": False}

        def fail(message: str) -> None:
            logger.error("Install of %s for %s failed: %s", package, client, message)
            result_obj.result = f"Installation failed: {message}"
            result_obj.output = ServerInstallOutput(
                errors=[message],
                warnings=[],
                success=False,
                qualified_name=package,
                server_name=get_server_name(package),
                client=state["client"],
                config_path=state["config_path"],
                remote=state["remote"],
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False

        try:
            yield (0.1, "Resolving client...")
            target = resolve_client(client)
            state["client"] = target.name
            state["config_path"] = str(target.path)

            yield (0.2, "Parsing configuration values...")
            supplied = parse_config_json(config_json)

            yield (0.3, "Checking API key...")
            key = ensure_api_key(api_key)

            yield (0.4, f"Resolving {package} from registry...")
            registry = RegistryClient.from_config(McpctlConfig.load(), api_key=key)
            server = registry.get_server(package)
            state["remote"] = check_and_notify_remote_server(server)
            connection = choose_connection(server)

            yield (0.5, "Checking runtime prerequisites...")
            ensure_uv_installed(connection)
            ensure_bun_installed(connection)

            yield (0.6, "Collecting configuration values...")
            values = collect_config_values(connection, supplied)

            yield (0.8, "Updating client configuration...")
            server_config = build_server_config(server, connection, values, api_key=key)
            restarted = install_server_for_client(target, server.qualified_name, server_config, restart_prompt)
        except click.exceptions.Abort:
            # Abort subclasses RuntimeError
            raise
        except (ValueError, RegistryError, RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (1.0, "Complete")
        logger.info("Installed %s for %s at %s", server.qualified_name, target.name, target.path)
        result_obj.result = f"{server.qualified_name} successfully installed for {target.name}"
        result_obj.output = ServerInstallOutput(
            errors=[],
            warnings=[],
            success=True,
            qualified_name=server.qualified_name,
            server_name=get_server_name(server.qualified_name),
            client=target.name,
            config_path=str(target.path),
            remote=state["remote"],
            restarted=restarted,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Installing {package} for '{client}'...",
        progress_callback=do_work,
    )
