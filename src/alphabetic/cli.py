"""``alphabetic`` command group.

Global flags are resolved into :class:`AlphabeticSettings` once, before
any subcommand runs, and handed down through :class:`AppContext`.
"""

from __future__ import annotations

import click

from alphabetic import __version__
from alphabetic.commands import register_commands
from alphabetic.commands._context import AppContext
from alphabetic.config.settings import AlphabeticSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="alphabetic")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting letters.")
@click.option("-v", "--verbose", is_flag=True, help="Show offsets, error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this TOML file instead of searching for alphabetic.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """alphabetic — inspect and shift Latin-script letters."""
    ctx.obj = AppContext(AlphabeticSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
