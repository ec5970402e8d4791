"""Registry API key handling."""

from .ensure_api_key import ensure_api_key
from .get_api_key import get_api_key
from .prompt_for_api_key import prompt_for_api_key
from .set_api_key import set_api_key

__all__ = ["ensure_api_key", "get_api_key", "prompt_for_api_key", "set_api_key"]
