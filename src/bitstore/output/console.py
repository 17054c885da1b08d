"""Rich Console factory and theme for bitstore output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Color is only emitted when the
caller asks for it (the real stream is a TTY).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BITSTORE_THEME = Theme(
    {
        "bitstore.ok": "green",
        "bitstore.error": "bold red",
        "bitstore.detail": "red",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles (forces terminal mode on the buffer).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BITSTORE_THEME,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")
