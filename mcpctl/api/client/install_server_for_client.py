"""Write one server entry into a client's configuration."""

from typing import Any

from ...display import get_display
from ...utils.verbose import verbose
from .ClientTarget import ClientTarget
from .get_server_name import get_server_name
from .prompt_for_restart import prompt_for_restart
from .read_config import read_config
from .resolve_client import resolve_client
from .write_config import write_config


def install_server_for_client(
    client: "str | ClientTarget",
    qualified_name: str,
    server_config: dict[str, Any],
    restart_prompt: bool = True,
) -> bool:
    """Replace the server's entry wholesale and write the file back.

    Returns:
        True if the client was restarted afterwards
    """
    target = resolve_client(client)
    config = read_config(target)

    verbose("Normalizing server ID...")
    server_name = get_server_name(qualified_name)
    verbose(f"Normalized server ID: {server_name}")

    config["mcpServers"][server_name] = server_config
    write_config(config, target)
    verbose("Configuration successfully written")

    get_display("cli").success(f"{qualified_name} successfully installed for {target.name}")
    if not restart_prompt:
        return False
    return prompt_for_restart(target)
