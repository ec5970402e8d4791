"""Resolve the registry API key for a command."""

import logging

from ...display import get_display
from ..config.McpctlConfig import McpctlConfig
from ..registry.RegistryClient import RegistryClient
from ..registry.RegistryError import RegistryError
from .get_api_key import get_api_key
from .prompt_for_api_key import prompt_for_api_key
from .set_api_key import set_api_key

logger = logging.getLogger(__name__)


def _key_accepted(api_key: str) -> bool:
    """Ask the registry about ``api_key``; an unreachable registry does not reject it."""
    registry = RegistryClient.from_config(McpctlConfig.load(), api_key=api_key)
    try:
        return registry.validate_api_key()
    except RegistryError as e:
        logger.warning("Could not validate API key: %s", e)
        get_display("cli").warning(f"Could not validate API key: {e}")
        return True


def ensure_api_key(api_key: str | None = None) -> str:
    """Return the key to use, prompting (and saving) only when none is known.

    A key given on the command line is used as-is and never persisted. A
    prompted key is checked against the registry and asked for again when
    rejected.
    """
    if api_key:
        return api_key

    saved = get_api_key()
    if saved:
        return saved

    prompted = prompt_for_api_key()
    while not _key_accepted(prompted):
        get_display("cli").error("The registry rejected that API key. Please try again.")
        prompted = prompt_for_api_key()

    if not set_api_key(prompted):
        get_display("cli").warning(
            "Warning: Could not save API key to config. You may need to enter it again next time."
        )
    return prompted
