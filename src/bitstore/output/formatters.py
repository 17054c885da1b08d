"""Human/JSON output for command results.

Success payloads go to stdout: structured values are pretty-printed in
full, text is printed as-is.  Failures go to stderr: the error message,
then the service's response body when there is one, then (verbose only)
the traceback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.pretty import Pretty
from rich.text import Text

from bitstore.output.console import create_console, get_output

if TYPE_CHECKING:
    from bitstore.services.result import CommandResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches taken from the global CLI flags."""

    json_output: bool = False
    verbose: bool = False
    color: bool = False


def _render_value(value: Any, style: str, settings: OutputSettings) -> str:
    if isinstance(value, str):
        return value
    console = create_console(color=settings.color)
    # No max_depth/max_length: payloads are always shown whole.
    console.print(Pretty(value, indent_guides=False), style=style, soft_wrap=True)
    return get_output(console)


def _format_json(result: CommandResult, settings: OutputSettings) -> str:
    exclude = None if settings.verbose else {"error": {"trace"}}
    return result.model_dump_json(indent=2, exclude=exclude)


def format_success(result: CommandResult, settings: OutputSettings) -> str:
    if result.data is None or result.data == "":
        return f"OK: {result.op}"
    return _render_value(result.data, "bitstore.ok", settings)


def format_failure(result: CommandResult, settings: OutputSettings) -> str:
    error = result.error
    message = error.message if error else "Unknown error"

    console = create_console(color=settings.color)
    console.print(Text(f"Error: {message}", style="bitstore.error"), soft_wrap=True)
    parts = [get_output(console)]

    if error is not None:
        if error.detail not in (None, ""):
            parts.append(_render_value(error.detail, "bitstore.detail", settings))
        if settings.verbose and error.trace:
            parts.append(error.trace.rstrip("\n"))
    return "\n".join(parts)


def format_result(result: CommandResult, *, settings: OutputSettings | None = None) -> str:
    """Format a CommandResult for display.

    Args:
        result: The outcome to format.
        settings: Output switches; defaults to human, non-verbose, no color.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return _format_json(result, settings)
    if result.ok:
        return format_success(result, settings)
    return format_failure(result, settings)
