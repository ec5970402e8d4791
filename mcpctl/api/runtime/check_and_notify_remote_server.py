from typing import Any

from ...display import get_display
from ...utils.verbose import verbose
from .is_remote import is_remote

DATA_POLICY_URL = "https://smithery.ai/docs/data-policy"


def check_and_notify_remote_server(server: Any) -> bool:
    """Print a trust notice for remote servers; returns is_remote(server)."""
    remote = is_remote(server)
    if remote:
        verbose("Remote server detected, showing security notice")
        get_display("cli").info(
            "Installing remote server. Please ensure you trust the server author, "
            "especially when sharing sensitive data.\n"
            f"For information on the registry's data policy, please visit: [underline]{DATA_POLICY_URL}[/underline]",
            style="blue",
        )
    return remote
