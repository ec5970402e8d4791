"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def _schema_key(func: Callable) -> tuple[str, str]:
    """Derive (domain, command) from a cmd function, e.g. mcpctl.api.server.cmd_install."""
    module = getattr(func, "__module__", "") or ""
    name = getattr(func, "__name__", "") or ""
    parts = module.split(".")
    domain = parts[-2] if len(parts) >= 2 else ""
    command = name[len("cmd_") :] if name.startswith("cmd_") else name
    return domain, command


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize output for a command function.

    Raises:
        ValueError: If no schema is registered or the output does not match it
    """
    domain, command = _schema_key(func)
    schema = get_output_schema(domain, command)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command}")
    try:
        return schema(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"{domain}.{command}: {e}") from e
