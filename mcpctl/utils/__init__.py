"""Shared helpers."""

from .configure_logging import configure_logging, enable_verbose_logging
from .expand_path import expand_path
from .get_logger import get_logger
from .get_mcpctl_home import get_mcpctl_home
from .verbose import verbose

__all__ = [
    "configure_logging",
    "enable_verbose_logging",
    "expand_path",
    "get_logger",
    "get_mcpctl_home",
    "verbose",
]
