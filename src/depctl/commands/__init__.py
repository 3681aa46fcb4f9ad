"""Subcommand modules for depctl.

Provides register_commands() which uses deferred imports to keep
``depctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from depctl.commands.check import check
    from depctl.commands.run import run

    cli.add_command(run)
    cli.add_command(check)
