"""Rich Console factory and theme for fqdncheck output.

Consoles render into a StringIO buffer so formatters return strings.
A StringIO is never a terminal, so the ``check.*`` styles only turn into
ANSI codes when the caller asks for color (stdout is a TTY); pipes and
scripts always get the plain, byte-exact messages.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CHECK_THEME = Theme(
    {
        "check.ok": "bold green",
        "check.error": "bold red",
        "check.detail": "yellow",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Render theme styles as ANSI codes despite the buffer.
        width: Override terminal width; long names must not wrap.
    """
    return Console(
        file=StringIO(),
        theme=CHECK_THEME,
        force_terminal=True if color else None,
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
