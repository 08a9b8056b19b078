"""Command: build a letter from its alphabet position."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from alphabetic.commands._base import LetterCommand
from alphabetic.domain.types import LetterCase

if TYPE_CHECKING:
    from alphabetic.commands._context import AppContext


@click.command(
    cls=LetterCommand,
    # Lets "-1" reach POSITION and be reported as out of range.
    context_settings={"ignore_unknown_options": True},
    examples="""\
  alphabetic letter 0
  alphabetic letter 2 --case uppercase
  alphabetic -q letter 25
  alphabetic letter -1        # INVALID_POSITION, exit 1""",
)
@click.argument("position", type=int)
@click.option(
    "--case",
    type=click.Choice([c.value for c in LetterCase]),
    default=None,
    help="Letter case. Defaults to [letters] default_case.",
)
@click.pass_obj
def letter(app: AppContext, position: int, case: str | None) -> None:
    """Print the letter at POSITION (0-25) in the alphabet."""
    app.emit(app.service.from_index(position, case))
