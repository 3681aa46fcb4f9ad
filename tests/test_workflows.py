"""End-to-end scenarios — whole command files through the CLI and the services."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from depctl.cli import cli
from depctl.infrastructure.system import PackageSystem
from depctl.services.commands import CommandService

WriteCommands = Callable[..., Path]

NETWORK_SESSION = [
    "DEPEND TELNET TCPIP NETCARD",
    "DEPEND TCPIP NETCARD",
    "DEPEND DNS TCPIP NETCARD",
    "DEPEND BROWSER TCPIP HTML",
    "INSTALL NETCARD",
    "INSTALL TELNET",
    "INSTALL foo",
    "REMOVE NETCARD",
    "INSTALL BROWSER",
    "INSTALL DNS",
    "LIST",
    "REMOVE TELNET",
    "REMOVE NETCARD",
    "REMOVE DNS",
    "REMOVE NETCARD",
    "INSTALL NETCARD",
    "REMOVE TCPIP",
    "REMOVE BROWSER",
    "REMOVE TCPIP",
    "LIST",
    "END",
]

NETWORK_TRANSCRIPT = [
    "DEPEND TELNET TCPIP NETCARD",
    "DEPEND TCPIP NETCARD",
    "DEPEND DNS TCPIP NETCARD",
    "DEPEND BROWSER TCPIP HTML",
    "INSTALL NETCARD",
    "   Installing NETCARD",
    "INSTALL TELNET",
    "   Installing TCPIP",
    "   Installing TELNET",
    "INSTALL foo",
    "   Installing foo",
    "REMOVE NETCARD",
    "   NETCARD is still needed.",
    "INSTALL BROWSER",
    "   Installing HTML",
    "   Installing BROWSER",
    "INSTALL DNS",
    "   Installing DNS",
    "LIST",
    "   BROWSER",
    "   DNS",
    "   HTML",
    "   NETCARD",
    "   TCPIP",
    "   TELNET",
    "   foo",
    "REMOVE TELNET",
    "   Removing TELNET",
    "REMOVE NETCARD",
    "   NETCARD is still needed.",
    "REMOVE DNS",
    "   Removing DNS",
    "REMOVE NETCARD",
    "   NETCARD is still needed.",
    "INSTALL NETCARD",
    "   NETCARD is already installed.",
    "REMOVE TCPIP",
    "   TCPIP is still needed.",
    "REMOVE BROWSER",
    "   Removing BROWSER",
    "   Removing TCPIP",
    "   Removing HTML",
    "REMOVE TCPIP",
    "   TCPIP is not installed",
    "LIST",
    "   NETCARD",
    "   foo",
    "END",
]


@pytest.mark.usefixtures("_isolated_cwd")
class TestTranscripts:
    def test_readme_session(self, cli_runner: CliRunner, write_commands: WriteCommands) -> None:
        path = write_commands(
            "DEPEND TELNET TCPIP NETCARD",
            "DEPEND TCPIP NETCARD",
            "INSTALL TELNET",
            "LIST",
            "REMOVE NETCARD",
            "REMOVE TELNET",
            "END",
        )
        result = cli_runner.invoke(cli, ["run", str(path)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "DEPEND TELNET TCPIP NETCARD",
            "DEPEND TCPIP NETCARD",
            "INSTALL TELNET",
            "   Installing NETCARD",
            "   Installing TCPIP",
            "   Installing TELNET",
            "LIST",
            "   NETCARD",
            "   TCPIP",
            "   TELNET",
            "REMOVE NETCARD",
            "   NETCARD is still needed.",
            "REMOVE TELNET",
            "   Removing TELNET",
            "   Removing TCPIP",
            "   Removing NETCARD",
            "END",
        ]

    def test_network_session(self, cli_runner: CliRunner, write_commands: WriteCommands) -> None:
        path = write_commands(*NETWORK_SESSION)
        result = cli_runner.invoke(cli, ["run", str(path)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == NETWORK_TRANSCRIPT

    def test_network_session_checks_clean(
        self, cli_runner: CliRunner, write_commands: WriteCommands
    ) -> None:
        path = write_commands(*NETWORK_SESSION)
        result = cli_runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 0


class TestServiceWorkflow:
    def test_installed_set_after_network_session(self) -> None:
        service = CommandService(PackageSystem())
        results = list(service.run(NETWORK_SESSION))
        assert all(r.ok for r in results)
        assert sorted(service.manager.installer.installed_names()) == ["NETCARD", "foo"]

    def test_protected_dependency_survives_cascade(self) -> None:
        service = CommandService(PackageSystem())
        list(service.run(["DEPEND A B", "INSTALL B", "INSTALL A", "REMOVE A", "LIST"]))
        assert service.manager.list_installed() == ["B"]
