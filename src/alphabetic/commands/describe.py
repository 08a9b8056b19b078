"""Command: show position and case of every letter in a word."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from alphabetic.commands._base import LetterCommand

if TYPE_CHECKING:
    from alphabetic.commands._context import AppContext


@click.command(
    cls=LetterCommand,
    examples="""\
  alphabetic describe Rust
  alphabetic --json describe Hi
  alphabetic -v describe abcXYZ""",
)
@click.argument("text")
@click.pass_obj
def describe(app: AppContext, text: str) -> None:
    """Show alphabet position and case for each letter of TEXT."""
    app.emit(app.service.describe(text))
