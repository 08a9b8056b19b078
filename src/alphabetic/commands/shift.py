"""Command: shift a single letter through the alphabet."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from alphabetic.commands._base import LetterCommand

if TYPE_CHECKING:
    from alphabetic.commands._context import AppContext


@click.command(
    cls=LetterCommand,
    examples="""\
  alphabetic shift A --by 5
  alphabetic shift z --by 2
  alphabetic shift o --by -3
  alphabetic -q shift n""",
)
@click.argument("letter")
@click.option(
    "--by",
    "amount",
    type=int,
    default=None,
    help="Places to move; negative moves backward. Defaults to [letters] default_shift.",
)
@click.pass_obj
def shift(app: AppContext, letter: str, amount: int | None) -> None:
    """Shift LETTER forward or backward, wrapping around the alphabet."""
    app.emit(app.service.shift(letter, amount))
