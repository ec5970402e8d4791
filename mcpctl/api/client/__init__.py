"""Client configuration files (the mcpServers documents)."""

from .ClientTarget import ClientTarget
from .get_client_targets import VALID_CLIENTS, get_client_targets
from .get_server_name import get_server_name
from .install_server_for_client import install_server_for_client
from .prompt_for_restart import prompt_for_restart
from .read_config import read_config
from .resolve_client import resolve_client
from .uninstall_server_for_client import uninstall_server_for_client
from .write_config import write_config

__all__ = [
    "VALID_CLIENTS",
    "ClientTarget",
    "get_client_targets",
    "get_server_name",
    "install_server_for_client",
    "prompt_for_restart",
    "read_config",
    "resolve_client",
    "uninstall_server_for_client",
    "write_config",
]
