"""Command: execute a command file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from depctl.commands._base import DepCommand, command_file_argument

if TYPE_CHECKING:
    from pathlib import Path

    from depctl.commands._context import AppContext


@click.command(
    cls=DepCommand,
    examples="""\
  depctl run commands.txt
  depctl --quiet run commands.txt
  depctl --json run commands.txt
  depctl -v --log-json run commands.txt""",
)
@command_file_argument
@click.pass_obj
def run(app: AppContext, command_file: Path) -> None:
    """Run the DEPEND/INSTALL/REMOVE/LIST/END commands in COMMAND_FILE.

    Each command line is echoed before its output.  Processing stops at the
    first failing line; earlier lines keep their effect.
    """
    from depctl.services.commands import CommandService

    lines = app.read_lines(command_file)
    for result in CommandService(app.system).run(lines):
        if result.meta:
            app.echo_line(result.meta["line"])
        app.emit(result)
