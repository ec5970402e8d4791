import json
from typing import Any


def parse_config_json(config_json: str | None) -> dict[str, Any]:
    """Parse the --config option; empty means no values.

    Raises:
        ValueError: If the text is not a JSON object
    """
    if not config_json or not config_json.strip():
        return {}
    try:
        value = json.loads(config_json)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in --config: {e.msg}") from e
    if not isinstance(value, dict):
        raise ValueError("--config must be a JSON object")
    return value
