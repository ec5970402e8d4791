"""List supported clients command."""

from collections.abc import Iterator

from .._output_schemas.client import ClientListOutput
from ..config.McpctlConfig import McpctlConfig
from ..StageResult import StageResult
from .get_client_targets import get_client_targets


def cmd_list() -> StageResult:
    """List supported clients and their configuration files.

    Returns:
        StageResult with one entry per client
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.3, "Loading configuration...")
        try:
            targets = get_client_targets(overrides=McpctlConfig.load().clients)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = ClientListOutput(
                errors=[str(e)],
                warnings=[],
                clients=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Checking client configuration files...")
        clients = [
            {
                "name": target.name,
                "label": target.label,
                "path": str(target.path),
                "exists": target.path.exists(),
            }
            for target in targets.values()
        ]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(clients)} supported client(s)"
        result_obj.output = ClientListOutput(
            errors=[],
            warnings=[],
            clients=clients,
            count=len(clients),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing supported clients...",
        progress_callback=do_work,
    )
