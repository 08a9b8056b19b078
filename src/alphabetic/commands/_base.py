"""``LetterCommand``: a click command that can print worked examples.

``--help`` stays short; ``--examples`` prints the invocations given in the
command's ``examples=`` keyword and exits before any argument is parsed.
"""

from __future__ import annotations

from typing import Any

import click


class LetterCommand(click.Command):
    """Command with an optional eager ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)
