"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the lazily built PackageSystem, command-file
loading, and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from depctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from depctl.config.settings import DepctlSettings
    from depctl.infrastructure.system import PackageSystem
    from depctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The package system is created on first use so ``--help`` and
    ``--version`` never build one.
    """

    def __init__(self, settings: DepctlSettings) -> None:
        self.settings = settings
        self._system: PackageSystem | None = None

        from depctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def system(self) -> PackageSystem:
        """The package system (created lazily on first access)."""
        if self._system is None:
            from depctl.infrastructure.system import PackageSystem

            self._system = PackageSystem(self.settings)
        return self._system

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            indent=self.settings.output.indent,
        )

    def read_lines(self, path: Path) -> list[str]:
        """Read a command file, emitting a READ_ERROR result (exit 1) on failure."""
        from depctl.domain.errors import CommandFileError
        from depctl.infrastructure.command_file import read_command_lines
        from depctl.services.result import ServiceError, ServiceResult

        try:
            return read_command_lines(path, encoding=self.settings.input.encoding)
        except CommandFileError as exc:
            self.fail(
                ServiceResult(
                    ok=False,
                    op="read",
                    error=ServiceError.from_exception(exc, path=str(path)),
                )
            )

    def echo_line(self, line: str) -> None:
        """Echo a command line before its output (human mode only)."""
        settings = self.settings
        if settings.json_output or settings.quiet or not settings.output.echo:
            return
        click.echo(line)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Nothing is written when the rendering is empty.  Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            self.fail(result)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self.output_settings), err=True)
        raise SystemExit(1)
