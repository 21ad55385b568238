"""Rich Console factory and theme for valuespace output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VS_THEME = Theme(
    {
        "vs.ok": "bold green",
        "vs.error": "bold red",
        "vs.warning": "bold yellow",
        "vs.op": "bold cyan",
        "vs.key": "dim",
        "vs.iri": "bold blue",
        "vs.family": "magenta",
        "vs.kind.text": "green",
        "vs.kind.integer": "yellow",
        "vs.message": "italic",
    }
)

_KIND_STYLES: dict[str, str] = {
    "text": "vs.kind.text",
    "integer": "vs.kind.integer",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=VS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str | None) -> str:
    """Return the Rich style name for a value kind."""
    return _KIND_STYLES.get(kind or "", "")
