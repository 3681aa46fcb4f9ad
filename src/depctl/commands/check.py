"""Command: static validation of a command file."""

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
  depctl check commands.txt
  depctl -v check commands.txt
  depctl --json check commands.txt""",
)
@command_file_argument
@click.pass_obj
def check(app: AppContext, command_file: Path) -> None:
    """Check COMMAND_FILE for errors without running it.

    Exits with code 1 when any issue is found.
    """
    from depctl.services.check import CheckService

    result = CheckService(app.system).check(app.read_lines(command_file))
    app.emit(result)
    if not result.data["healthy"]:
        raise SystemExit(1)
