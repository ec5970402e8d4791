"""Runtime prerequisites (uv, bun) and remote-server detection."""

from .check_and_notify_remote_server import check_and_notify_remote_server
from .check_installed import check_bun_installed, check_uv_installed
from .ensure_installed import ensure_bun_installed, ensure_uv_installed
from .get_runtime_environment import get_runtime_environment
from .is_remote import is_remote
from .is_required import is_bun_required, is_uv_required
from .prompt_for_install import prompt_for_bun_install, prompt_for_uv_install

__all__ = [
    "check_and_notify_remote_server",
    "check_bun_installed",
    "check_uv_installed",
    "ensure_bun_installed",
    "ensure_uv_installed",
    "get_runtime_environment",
    "is_bun_required",
    "is_remote",
    "is_uv_required",
    "prompt_for_bun_install",
    "prompt_for_uv_install",
]
