"""Detect operating system for installer selection."""

import platform


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        OS identifier string: "macos", "linux", "windows", or the raw lowercased system name
    """
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    if system == "windows":
        return "windows"
    return system
