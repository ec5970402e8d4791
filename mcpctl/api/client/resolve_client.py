from ..config.McpctlConfig import McpctlConfig
from .ClientTarget import ClientTarget
from .get_client_targets import VALID_CLIENTS, get_client_targets


def resolve_client(client: "str | ClientTarget", targets: dict[str, ClientTarget] | None = None) -> ClientTarget:
    """Look up a client by name (case-insensitive).

    Path overrides from the user config apply when ``targets`` is not given.

    Raises:
        ValueError: If the client is not supported
    """
    if isinstance(client, ClientTarget):
        return client
    if targets is None:
        targets = get_client_targets(overrides=McpctlConfig.load().clients)
    key = (client or "").strip().lower()
    if key not in targets:
        valid = ", ".join(targets) if targets else ", ".join(VALID_CLIENTS)
        raise ValueError(f"Invalid client '{client}'. Valid clients are: {valid}")
    return targets[key]
