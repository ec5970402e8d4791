"""Uninstall MCP server command."""

import logging
from collections.abc import Iterator

from .._output_schemas.server import ServerUninstallOutput
from ..client.get_server_name import get_server_name
from ..client.resolve_client import resolve_client
from ..client.uninstall_server_for_client import uninstall_server_for_client
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_uninstall(package: str, client: str, restart_prompt: bool = True) -> StageResult:
    """Remove a server from a client's configuration.

    Args:
        package: Qualified server name (or the plain mcpServers key)
        client: Target client name
        restart_prompt: Offer to restart the client afterwards

    Returns:
        StageResult with uninstallation status
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        server_name = get_server_name(package)
        config_path = ""
        client_name = client
        try:
            yield (0.2, "Resolving client...")
            target = resolve_client(client)
            config_path = str(target.path)
            client_name = target.name

            yield (0.5, "Removing server entry...")
            restarted = uninstall_server_for_client(target, package, restart_prompt)
        except (ValueError, OSError) as e:
            yield (1.0, "Complete")
            logger.error("Uninstall of %s for %s failed: %s", package, client, e)
            result_obj.result = f"Uninstallation failed: {e}"
            result_obj.output = ServerUninstallOutput(
                errors=[str(e)],
                warnings=[],
                success=False,
                qualified_name=package,
                server_name=server_name,
                client=client_name,
                config_path=config_path,
                restarted=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        logger.info("Uninstalled %s from %s", server_name, config_path)
        result_obj.result = f"{package} successfully uninstalled from {client_name}"
        result_obj.output = ServerUninstallOutput(
            errors=[],
            warnings=[],
            success=True,
            qualified_name=package,
            server_name=server_name,
            client=client_name,
            config_path=config_path,
            restarted=restarted,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Uninstalling {package} from '{client}'...",
        progress_callback=do_work,
    )
