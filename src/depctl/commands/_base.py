"""Click building blocks shared by every depctl command.

``DepCommand`` and ``DepGroup`` take an ``examples`` string and expose it
through an eager ``--examples`` flag, so ``--help`` stays short.
``command_file_argument`` is the COMMAND_FILE positional used by both
``run`` and ``check``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

command_file_argument = click.argument(
    "command_file",
    type=click.Path(dir_okay=False, path_type=Path),
)


def _examples_option(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class DepCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DepGroup(_ExamplesMixin, click.Group):
    """Group accepting an ``examples`` keyword; subcommands default to DepCommand."""

    command_class = DepCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
