"""Server install, uninstall, inspect and run."""

from .build_server_config import build_server_config
from .collect_config_values import collect_config_values
from .parse_config_json import parse_config_json
from .run_server import run_server

__all__ = ["build_server_config", "collect_config_values", "parse_config_json", "run_server"]
