"""Probe whether a runtime binary answers ``--version``."""

import subprocess

from ...utils.verbose import verbose


def _answers_version(binary: str) -> bool:
    try:
        subprocess.run(
            [binary, "--version"],
            capture_output=True,
            text=True,
            check=True,
            timeout=30,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        verbose(f"{binary} --version failed: {e}")
        return False
    return True


def check_uv_installed() -> bool:
    """True if ``uvx --version`` exits successfully."""
    return _answers_version("uvx")


def check_bun_installed() -> bool:
    """True if ``bun --version`` exits successfully."""
    return _answers_version("bun")
