"""Make sure the runtime a connection needs is present, asking if not."""

from ...display import get_display
from ...utils.verbose import verbose
from ..registry.ConnectionInfo import ConnectionInfo
from . import check_installed, prompt_for_install
from .is_required import is_bun_required, is_uv_required


def ensure_uv_installed(connection: ConnectionInfo) -> None:
    """Install uv if the connection needs it; warn and continue on failure."""
    if not is_uv_required(connection):
        return
    verbose("UV installation check required")
    if check_installed.check_uv_installed():
        return
    if not prompt_for_install.prompt_for_uv_install():
        get_display("cli").warning("UV is not installed. The server might fail to launch.")


def ensure_bun_installed(connection: ConnectionInfo) -> None:
    """Install bun if the connection needs it; warn and continue on failure."""
    if not is_bun_required(connection):
        return
    verbose("Bun installation check required")
    if check_installed.check_bun_installed():
        return
    if not prompt_for_install.prompt_for_bun_install():
        get_display("cli").warning("Bun is not installed. The server might fail to launch.")
