import logging

from ..config.McpctlConfig import McpctlConfig

logger = logging.getLogger(__name__)


def set_api_key(api_key: str) -> bool:
    """Persist the API key in the config file. Returns False instead of raising."""
    try:
        config = McpctlConfig.load()
        config.api_key = api_key
        config.save()
    except (ValueError, RuntimeError) as e:
        logger.warning("Could not save API key: %s", e)
        return False
    return True
