from typing import Any


def is_remote(server: Any) -> bool:
    """True if some http connection publishes ``deploymentUrl`` and ``remote`` is not False.

    Presence of the field counts, even when the registry sends it as null.
    """
    has_deployment = any(
        conn.type == "http" and "deployment_url" in conn.model_fields_set for conn in server.connections
    )
    return has_deployment and server.remote is not False
