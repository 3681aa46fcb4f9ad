"""Root CLI group for depctl with global flags and command registration."""

from __future__ import annotations

import click

from depctl import __version__
from depctl.commands import register_commands
from depctl.commands._base import DepGroup
from depctl.commands._context import AppContext
from depctl.config.settings import DepctlSettings


@click.group(
    cls=DepGroup,
    invoke_without_command=True,
    examples="""\
  depctl run commands.txt
  depctl check commands.txt
  depctl -c ./depctl.toml --json run commands.txt""",
)
@click.version_option(version=__version__, prog_name="depctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON Lines output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """depctl — package dependency bookkeeping."""
    ctx.ensure_object(dict)
    settings = DepctlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
