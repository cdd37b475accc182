"""Value and result formatting.

Accepted values are echoed the way a C-style stream would print them:
booleans as ``true``/``false`` and floating-point numbers in shortest
``%g`` form.  Results render as plain text for humans or JSON with
``--json``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from repval.services.result import ServiceResult


def format_value(value: Any) -> str:
    """Render a read value for display."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {format_value(value)}")
    return "\n".join(lines)


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        quiet: Print only the accepted value (or the error message).
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"
    if quiet and "value" in result.data:
        return format_value(result.data["value"])
    parts = [f"OK: {result.op}"]
    if result.data:
        parts.append(_format_data_human(result.data))
    return "\n".join(parts)
