"""Pick the connection to install or run."""

from ..runtime.is_remote import is_remote
from .ConnectionInfo import ConnectionInfo
from .ServerDetails import ServerDetails


def choose_connection(server: ServerDetails) -> ConnectionInfo:
    """Prefer http for remote servers, stdio otherwise, else the first listed.

    Raises:
        ValueError: If the server publishes no connections
    """
    if not server.connections:
        raise ValueError(f"Server '{server.qualified_name}' has no connections")

    if is_remote(server):
        for connection in server.connections:
            if connection.type == "http" and connection.deployment_url:
                return connection

    for connection in server.connections:
        if connection.type == "stdio":
            return connection

    return server.connections[0]
