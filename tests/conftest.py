"""Shared pytest fixtures and test helpers for depctl tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from depctl.infrastructure.system import PackageSystem
from depctl.services.commands import CommandService
from depctl.services.manager import DependencyManager


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def system() -> PackageSystem:
    """Fresh package system with an empty registry and installed set."""
    return PackageSystem()


@pytest.fixture
def manager(system: PackageSystem) -> DependencyManager:
    """Dependency manager in its initial ACCEPTING_DEPENDS state."""
    return DependencyManager(system)


@pytest.fixture
def commands(system: PackageSystem) -> CommandService:
    """Command service over a fresh package system."""
    return CommandService(system)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no depctl.toml above it.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so config discovery never picks up a stray file.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEPCTL_CONFIG", str(tmp_path / "no-such-depctl.toml"))


@pytest.fixture
def write_commands(tmp_path: Path) -> Callable[..., Path]:
    """Write command lines to a file and return its path."""

    def _write(*lines: str, name: str = "commands.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def depend(manager: DependencyManager) -> Callable[[dict[str, list[str]]], None]:
    """Register every ``package -> dependencies`` entry of a graph dict."""

    def _depend(graph: dict[str, list[str]]) -> None:
        for name, deps in graph.items():
            manager.specify_dependencies(name, deps)

    return _depend
