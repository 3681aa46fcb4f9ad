"""CommandService — parse one command line, run it, wrap the outcome.

Bridges the line-oriented command stream and :class:`DependencyManager`.
Each non-blank line produces exactly one ServiceResult; any
:class:`DepctlError` becomes an ``ok=False`` result carrying the error
code, and the caller is expected to stop processing at that point.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

import structlog

from depctl.domain.errors import DepctlError
from depctl.domain.grammar import CommandName, ParsedCommand, parse_command
from depctl.services.base import BaseService
from depctl.services.contracts import (
    DependResultData,
    EndResultData,
    InstallResultData,
    ListResultData,
    RemoveResultData,
    dump_validated,
)
from depctl.services.manager import DependencyManager
from depctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from depctl.infrastructure.system import PackageSystem

log = structlog.get_logger(__name__)


class CommandService(BaseService):
    """Executes command lines against one dependency manager session."""

    def __init__(self, system: PackageSystem) -> None:
        super().__init__(system)
        self._manager = DependencyManager(system)
        self._handlers: dict[CommandName, Callable[[ParsedCommand], dict[str, Any]]] = {
            CommandName.DEPEND: self._depend,
            CommandName.INSTALL: self._install,
            CommandName.REMOVE: self._remove,
            CommandName.LIST: self._list,
            CommandName.END: self._end,
        }

    @property
    def manager(self) -> DependencyManager:
        return self._manager

    def execute(self, line: str, *, line_number: int | None = None) -> ServiceResult | None:
        """Run one command line.

        Returns None for blank lines, which are ignored entirely.  The line,
        minus its line ending, and its number are carried in ``meta`` for
        echoing.
        """
        op = "command"
        meta = {"line": line.rstrip("\r\n"), "line_number": line_number}
        try:
            command = parse_command(line)
            if command is None:
                return None
            op = command.name.lower()
            data = self._handlers[command.name](command)
        except DepctlError as exc:
            log.debug("command_failed", op=op, line_number=line_number, code=exc.code)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError.from_exception(exc, **meta),
                meta=meta,
            )

        log.debug("command_done", op=op, line_number=line_number)
        return ServiceResult(ok=True, op=op, data=data, meta=meta)

    def run(self, lines: Iterable[str]) -> Iterator[ServiceResult]:
        """Run *lines* in order, stopping after the first failed result."""
        for number, line in enumerate(lines, start=1):
            result = self.execute(line, line_number=number)
            if result is None:
                continue
            yield result
            if not result.ok:
                return

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _depend(self, command: ParsedCommand) -> dict[str, Any]:
        name, *deps = command.args
        self._manager.specify_dependencies(name, deps)
        return dump_validated(DependResultData, {"package": name, "dependencies": deps})

    def _install(self, command: ParsedCommand) -> dict[str, Any]:
        name = command.args[0]
        outcomes = self._manager.install(name)
        return dump_validated(
            InstallResultData,
            {
                "package": name,
                "count": len(outcomes),
                "items": [asdict(o) for o in outcomes],
            },
        )

    def _remove(self, command: ParsedCommand) -> dict[str, Any]:
        name = command.args[0]
        outcomes = self._manager.remove(name)
        return dump_validated(
            RemoveResultData,
            {
                "package": name,
                "count": len(outcomes),
                "items": [asdict(o) for o in outcomes],
            },
        )

    def _list(self, command: ParsedCommand) -> dict[str, Any]:
        names = self._manager.list_installed()
        return dump_validated(ListResultData, {"count": len(names), "items": names})

    def _end(self, command: ParsedCommand) -> dict[str, Any]:
        self._manager.end()
        return dump_validated(EndResultData, {"state": self._manager.state})
