"""Fill in server configuration from --config values and prompts."""

from typing import Any

import typer

from ..registry.ConnectionInfo import ConnectionInfo

_SECRET_HINTS = ("key", "token", "secret", "password")


def _coerce(raw: str, prop_type: str | None, name: str) -> Any:
    if prop_type == "boolean":
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "y", "1"):
            return True
        if lowered in ("false", "no", "n", "0"):
            return False
        raise ValueError(f"'{name}' must be a boolean, got {raw!r}")
    if prop_type == "integer":
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"'{name}' must be an integer, got {raw!r}") from None
    if prop_type == "number":
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"'{name}' must be a number, got {raw!r}") from None
    return raw


def collect_config_values(connection: ConnectionInfo, existing: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return ``existing`` plus a prompted value for each missing required property.

    Raises:
        ValueError: If a prompted value cannot be coerced to the schema type
    """
    values = dict(existing or {})
    properties: dict[str, Any] = connection.config_schema.get("properties") or {}

    for name in connection.required_config_keys():
        if name in values:
            continue
        prop = properties.get(name) or {}
        prop_type = prop.get("type")
        description = prop.get("description")
        message = f"{name} ({description})" if description else name
        default = prop.get("default")
        hide = prop_type == "string" and any(hint in name.lower() for hint in _SECRET_HINTS)
        if default is not None:
            default_text = str(default).lower() if isinstance(default, bool) else str(default)
            raw = typer.prompt(message, default=default_text, hide_input=hide)
        else:
            raw = typer.prompt(message, hide_input=hide)
        values[name] = _coerce(str(raw), prop_type, name)

    return values
