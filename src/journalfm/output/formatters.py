"""Human and JSON renderings of ServiceResult."""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from journalfm.output.console import create_console, get_output

if TYPE_CHECKING:
    from journalfm.services.result import ServiceResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[jfm.ok]OK[/]: [jfm.op]{result.op}[/]")
        for key, value in result.data.items():
            console.print(f"  [jfm.key]{key}[/]: {escape(_format_value(value))}", soft_wrap=True)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[jfm.error]ERROR[/]: [jfm.op]{result.op}[/] - {escape(message)}", soft_wrap=True)
    return get_output(console).rstrip("\n")
