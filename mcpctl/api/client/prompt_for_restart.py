"""Offer to restart a client so it picks up the new configuration."""

import logging
import subprocess
import time

import typer

from ...display import get_display
from ..runtime._detect_os import detect_os
from .ClientTarget import ClientTarget
from .resolve_client import resolve_client

logger = logging.getLogger(__name__)


def _restart_macos_app(app_name: str) -> None:
    subprocess.run(["killall", app_name], capture_output=True, check=False)
    # Give the app a moment to exit before relaunching
    time.sleep(2)
    subprocess.run(["open", "-a", app_name], capture_output=True, check=True)


def prompt_for_restart(client: "str | ClientTarget") -> bool:
    """Ask to restart the client; returns True if it was restarted."""
    target = resolve_client(client)
    display = get_display("cli")

    if not typer.confirm(f"Would you like to restart the {target.label} app to apply changes?", default=True):
        display.info(f"Please restart {target.label} to apply the changes.")
        return False

    if detect_os() != "macos" or not target.app_name:
        display.info(f"Please restart {target.label} manually to apply the changes.")
        return False

    display.info(f"Restarting {target.label}...")
    try:
        _restart_macos_app(target.app_name)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning("Failed to restart %s: %s", target.app_name, e)
        display.warning(f"Failed to restart {target.label}. Please restart it manually.")
        return False

    display.success(f"{target.label} has been restarted.")
    return True
