"""Rich Console factory and theme for depctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEPCTL_THEME = Theme(
    {
        "dep.ok": "bold green",
        "dep.error": "bold red",
        "dep.warning": "bold yellow",
        "dep.op": "bold cyan",
        "dep.key": "dim",
        "dep.package": "bold",
        "dep.installed": "green",
        "dep.removed": "red",
        "dep.unchanged": "dim",
        "dep.line": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Lines are never wrapped, so long package names survive piping intact.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DEPCTL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
