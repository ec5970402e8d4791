"""Server registry client and models."""

from .choose_connection import choose_connection
from .ConnectionInfo import ConnectionInfo
from .RegistryClient import RegistryClient
from .RegistryError import RegistryError, ServerNotFoundError
from .ServerDetails import ServerDetails

__all__ = [
    "ConnectionInfo",
    "RegistryClient",
    "RegistryError",
    "ServerDetails",
    "ServerNotFoundError",
    "choose_connection",
]
