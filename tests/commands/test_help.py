"""Help and --examples output for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from depctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["run", "check", "--json", "--quiet", "--verbose", "--log-json", "--config"]),
    (["run", "--help"], ["COMMAND_FILE", "--examples"]),
    (["check", "--help"], ["COMMAND_FILE", "without running"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["depctl run commands.txt", "depctl check commands.txt"]),
    (["run", "--examples"], ["depctl --quiet run", "depctl --json run"]),
    (["check", "--examples"], ["depctl -v check"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS, ids=lambda v: str(v))
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS, ids=lambda v: str(v))
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
