"""Validate a command's output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` of ``func`` and return the normalized dict.

    The schema is looked up by domain (package under ``alts.api``) and
    command name (function name without ``cmd_``).

    Raises:
        ValueError: If no schema is registered or validation fails
    """
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["alts", "api"]:
        raise ValueError(f"Cannot determine domain for {func.__module__}.{func.__name__}")
    domain = parts[2]
    command_name = func.__name__.removeprefix("cmd_")

    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    return schema.model_validate(output).model_dump(mode="python")
