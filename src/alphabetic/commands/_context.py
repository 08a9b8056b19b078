"""Per-invocation state handed to every subcommand via ``@click.pass_obj``."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from alphabetic.config.logging import configure_logging
from alphabetic.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from alphabetic.config.settings import AlphabeticSettings
    from alphabetic.services.letters import LetterService
    from alphabetic.services.result import ServiceResult


class AppContext:
    """Settings, the letter service, and result printing for one run.

    Logging is configured on construction so that service debug output
    honours ``--verbose`` and ``--log-json``.
    """

    def __init__(self, settings: AlphabeticSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def service(self) -> LetterService:
        from alphabetic.services.letters import LetterService

        return LetterService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it failed.

        Successful output goes to stdout, with any warnings on stderr
        (JSON output already carries them). Failures go to stderr.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
