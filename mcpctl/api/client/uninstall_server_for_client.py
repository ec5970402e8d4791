"""Remove one server entry from a client's configuration."""

from ...display import get_display
from ...utils.verbose import verbose
from .ClientTarget import ClientTarget
from .get_server_name import get_server_name
from .prompt_for_restart import prompt_for_restart
from .read_config import read_config
from .resolve_client import resolve_client
from .write_config import write_config


def uninstall_server_for_client(
    client: "str | ClientTarget",
    qualified_name: str,
    restart_prompt: bool = True,
) -> bool:
    """Delete the server's entry and write the file back.

    Returns:
        True if the client was restarted afterwards

    Raises:
        ValueError: If the server is not installed for the client
    """
    target = resolve_client(client)
    config = read_config(target)
    server_name = get_server_name(qualified_name)

    if server_name not in config["mcpServers"]:
        raise ValueError(f"Server '{server_name}' is not installed for {target.name}")

    del config["mcpServers"][server_name]
    write_config(config, target)
    verbose(f"Removed {server_name} from {target.path}")

    get_display("cli").success(f"{qualified_name} successfully uninstalled from {target.name}")
    if not restart_prompt:
        return False
    return prompt_for_restart(target)
