"""Decide which runtime a connection needs."""

from ..registry.ConnectionInfo import ConnectionInfo


def _stdio_mentions(connection: ConnectionInfo, needle: str) -> bool:
    return connection.type == "stdio" and needle in connection.launch_text


def is_uv_required(connection: ConnectionInfo) -> bool:
    """A stdio connection launched through ``uvx`` needs uv."""
    return _stdio_mentions(connection, "uvx")


def is_bun_required(connection: ConnectionInfo) -> bool:
    """A stdio connection launched through ``bunx`` needs bun."""
    return _stdio_mentions(connection, "bunx")
