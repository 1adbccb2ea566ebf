"""Rich Console factory and theme for fluentlink output.

Consoles render into a StringIO buffer so ``format_result() -> str`` stays
a plain function. Without a terminal (tests, pipes) Rich emits no colour.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FLUENT_THEME = Theme(
    {
        "fluent.ok": "bold green",
        "fluent.error": "bold red",
        "fluent.op": "bold cyan",
        "fluent.key": "dim",
        "fluent.code": "bold blue",
        "fluent.link": "underline",
        "fluent.default": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width; defaults to 120 for stable output.
    """
    return Console(
        file=StringIO(),
        theme=FLUENT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
