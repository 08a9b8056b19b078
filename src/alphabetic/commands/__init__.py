"""Subcommand modules for alphabetic.

Provides register_commands() which uses deferred imports to keep
``alphabetic --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from alphabetic.commands.describe import describe
    from alphabetic.commands.letter import letter
    from alphabetic.commands.shift import shift

    cli.add_command(describe)
    cli.add_command(shift)
    cli.add_command(letter)
