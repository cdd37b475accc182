"""Rich Console factory and theme for repval output.

Interactive prompts and rejection messages are written through a
Console.  Tests use :func:`create_console`, which renders to a StringIO
buffer; the CLI uses :func:`terminal_console`.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

import sys
from io import StringIO

from rich.console import Console
from rich.theme import Theme

REPVAL_THEME = Theme(
    {
        "rv.prompt": "bold",
        "rv.ok": "bold green",
        "rv.error": "bold red",
        "rv.banner": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REPVAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def terminal_console(*, err: bool = False, no_color: bool = False) -> Console:
    """Create a Console bound to the process's stdout (or stderr)."""
    return Console(
        file=sys.stderr if err else sys.stdout,
        theme=REPVAL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def say(console: Console, text: str, *, style: str = "", end: str = "") -> None:
    """Write *text* verbatim, without markup parsing or wrapping.

    Prompts end without a newline so the user types on the same line.
    """
    console.print(text, style=style, end=end, markup=False, highlight=False, soft_wrap=True)
