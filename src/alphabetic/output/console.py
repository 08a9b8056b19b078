"""Rich Console factory and theme for alphabetic output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from alphabetic.domain.types import LetterCase

ALPHABETIC_THEME = Theme(
    {
        "abc.ok": "bold green",
        "abc.error": "bold red",
        "abc.warning": "bold yellow",
        "abc.op": "bold cyan",
        "abc.key": "dim",
        "abc.char": "bold",
        "abc.position": "magenta",
        "abc.case.lowercase": "green",
        "abc.case.uppercase": "blue",
    }
)

_CASE_STYLES: dict[str, str] = {
    LetterCase.LOWERCASE: "abc.case.lowercase",
    LetterCase.UPPERCASE: "abc.case.uppercase",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ALPHABETIC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_case(case: str) -> str:
    """Return the Rich style name for a letter case value."""
    return _CASE_STYLES.get(case, "")
