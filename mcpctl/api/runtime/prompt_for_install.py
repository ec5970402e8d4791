"""Ask for permission, then run the platform installer for a runtime."""

import logging
import subprocess
from collections.abc import Sequence

import typer

from ...display import get_display
from ._detect_os import detect_os

logger = logging.getLogger(__name__)

UV_INSTALL_URL = "https://astral.sh/uv"
BUN_INSTALL_URL = "https://bun.sh"

UV_WINDOWS_INSTALL = 'powershell -ExecutionPolicy ByPass -c "irm https://astral.sh/uv/install.ps1 | iex"'
UV_POSIX_INSTALLS = (
    "curl -LsSf https://astral.sh/uv/install.sh | sh",
    "wget -qO- https://astral.sh/uv/install.sh | sh",
)
BUN_WINDOWS_INSTALL = 'powershell -c "irm bun.sh/install.ps1|iex"'
BUN_POSIX_INSTALLS = (
    "brew install oven-sh/bun/bun",
    "curl -fsSL https://bun.sh/install | bash",
)


def _run_shell(command: str) -> None:
    """Run an installer one-liner; raises CalledProcessError on non-zero exit."""
    logger.info("Running installer: %s", command)
    subprocess.run(command, shell=True, check=True, capture_output=True, text=True)


def _run_first_success(commands: Sequence[str]) -> None:
    """Try each command in turn; re-raise the last failure."""
    last_error: Exception | None = None
    for command in commands:
        try:
            _run_shell(command)
            return
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning("Installer failed: %s (%s)", command, e)
            last_error = e
    if last_error is not None:
        raise last_error


def _install_commands(windows: str, posix: Sequence[str]) -> Sequence[str]:
    if detect_os() == "windows":
        return (windows,)
    return posix


def prompt_for_uv_install() -> bool:
    """Offer to install uv. Returns True only if the installer succeeded."""
    display = get_display("cli")
    should_install = typer.confirm(
        "UV package manager is required for Python MCP servers. Would you like to install it?",
        default=True,
    )
    if not should_install:
        display.warning(f"UV installation was declined. You can install it manually from {UV_INSTALL_URL}")
        return False

    spinner = display.spinner_start("Installing UV package manager...")
    try:
        _run_first_success(_install_commands(UV_WINDOWS_INSTALL, UV_POSIX_INSTALLS))
    except (OSError, subprocess.CalledProcessError):
        display.spinner_finish(
            spinner,
            f"Failed to install UV. You can install it manually from {UV_INSTALL_URL}",
            failed=True,
        )
        return False

    display.spinner_finish(spinner, "UV installed successfully")
    return True


def prompt_for_bun_install() -> bool:
    """Offer to install bun. Returns True only if the installer succeeded."""
    display = get_display("cli")
    should_install = typer.confirm(
        "Bun is required for this operation. Would you like to install it?",
        default=True,
    )
    if not should_install:
        display.warning(f"Bun installation was declined. You can install it manually from {BUN_INSTALL_URL}")
        return False

    spinner = display.spinner_start("Installing Bun...")
    try:
        _run_first_success(_install_commands(BUN_WINDOWS_INSTALL, BUN_POSIX_INSTALLS))
    except (OSError, subprocess.CalledProcessError) as e:
        display.spinner_finish(spinner, f"Failed to install Bun: {e}", failed=True)
        display.info(f"Please install Bun manually from {BUN_INSTALL_URL}")
        return False

    display.spinner_finish(spinner, "Bun installed successfully!")
    return True
