"""List servers installed for a client command."""

from collections.abc import Iterator

from .._output_schemas.client import ClientServersOutput
from ..StageResult import StageResult
from .read_config import read_config
from .resolve_client import resolve_client


def cmd_servers(client: str) -> StageResult:
    """List server names in a client's mcpServers map.

    Args:
        client: Client name

    Returns:
        StageResult with the configured server names
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Resolving client...")
        try:
            target = resolve_client(client)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ClientServersOutput(
                errors=[str(e)],
                warnings=[],
                client=client,
                config_path="",
                servers=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Reading client configuration...")
        warnings: list[str] = []
        if not target.path.exists():
            warnings.append(f"Configuration file does not exist: {target.path}")
        try:
            servers = sorted(read_config(target)["mcpServers"])
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read {target.path}: {e}"
            result_obj.output = ClientServersOutput(
                errors=[str(e)],
                warnings=warnings,
                client=target.name,
                config_path=str(target.path),
                servers=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(servers)} server(s) installed for {target.name}"
        result_obj.output = ClientServersOutput(
            errors=[],
            warnings=warnings,
            client=target.name,
            config_path=str(target.path),
            servers=servers,
            count=len(servers),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Listing servers installed for '{client}'...",
        progress_callback=do_work,
    )
