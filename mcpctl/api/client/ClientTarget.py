"""A supported AI client and where its MCP configuration lives."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ClientTarget:
    """A supported AI client and where its MCP configuration lives."""

    name: str
    path: Path
    label: str
    app_name: str = ""
