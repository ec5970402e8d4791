"""Inspect a registry server command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.server import ServerInspectOutput
from ..auth.ensure_api_key import ensure_api_key
from ..config.McpctlConfig import McpctlConfig
from ..registry.ConnectionInfo import ConnectionInfo
from ..registry.RegistryClient import RegistryClient
from ..registry.RegistryError import RegistryError
from ..runtime.is_remote import is_remote
from ..runtime.is_required import is_bun_required, is_uv_required
from ..StageResult import StageResult


def _summarize(connection: ConnectionInfo) -> dict[str, Any]:
    runtimes = []
    if is_uv_required(connection):
        runtimes.append("uv")
    if is_bun_required(connection):
        runtimes.append("bun")
    return {
        "type": connection.type,
        "url": connection.deployment_url or "",
        "launch": connection.launch_text if connection.type == "stdio" else "",
        "required_config": connection.required_config_keys(),
        "runtimes": runtimes,
    }


def cmd_inspect(server_id: str, api_key: str | None = None) -> StageResult:
    """Show registry metadata for a server.

    Args:
        server_id: Qualified server name
        api_key: Registry API key; used as-is and never saved

    Returns:
        StageResult with server metadata and connection summaries
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        try:
            yield (0.2, "Checking API key...")
            key = ensure_api_key(api_key)

            yield (0.5, f"Resolving {server_id} from registry...")
            server = RegistryClient.from_config(McpctlConfig.load(), api_key=key).get_server(server_id)
        except (ValueError, RegistryError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Inspection failed: {e}"
            result_obj.output = ServerInspectOutput(
                errors=[str(e)],
                warnings=[],
                qualified_name=server_id,
                server={},
                connections=[],
                remote=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.8, "Summarizing connections...")
        warnings = [] if server.connections else ["Server publishes no connections"]
        details = {
            "display_name": server.display_name,
            "description": server.description,
            "homepage": server.homepage or "",
            "tools": [tool.get("name", "") for tool in server.tools or []],
        }

        yield (1.0, "Complete")
        result_obj.result = f"Found {server.qualified_name} with {len(server.connections)} connection(s)"
        result_obj.output = ServerInspectOutput(
            errors=[],
            warnings=warnings,
            qualified_name=server.qualified_name,
            server=details,
            connections=[_summarize(c) for c in server.connections],
            remote=is_remote(server),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Inspecting {server_id}...",
        progress_callback=do_work,
    )
