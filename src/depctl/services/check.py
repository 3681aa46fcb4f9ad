"""CheckService — static validation of a command file.

Reports every problem a run would stop at, without installing or removing
anything: unknown commands, wrong argument counts, DEPEND after another
command, commands after END, and dependency cycles.  Unlike a run, the
check keeps going after the first issue so a file can be fixed in one pass.
"""

from __future__ import annotations

from typing import Any

from depctl.domain.errors import DependencyCycleError, DepctlError, SequenceError
from depctl.domain.grammar import CommandName, parse_command
from depctl.infrastructure.graph.registry import PackageRegistry
from depctl.services.base import BaseService
from depctl.services.contracts import CheckResultData, dump_validated
from depctl.services.result import ServiceResult


class CheckService(BaseService):
    """Lints command files."""

    def check(self, lines: list[str]) -> ServiceResult:
        """Report issues in *lines* without modifying the package system."""
        issues: list[dict[str, Any]] = []
        # Edges are simulated on a scratch registry so cycles can be detected.
        scratch = PackageRegistry()
        seen_other = False
        ended = False
        commands = 0

        for number, line in enumerate(lines, start=1):
            try:
                command = parse_command(line)
                if command is None:
                    continue
                commands += 1

                if ended:
                    raise SequenceError("No commands may be issued after END.")
                if command.name is CommandName.DEPEND:
                    if seen_other:
                        raise SequenceError(
                            "DEPEND command cannot be issued once other commands "
                            "have been issued."
                        )
                    _simulate_depend(scratch, command.args)
                else:
                    seen_other = True
                    ended = command.name is CommandName.END
            except DepctlError as exc:
                issues.append(
                    {
                        "line_number": number,
                        "line": line.rstrip("\r\n"),
                        "code": exc.code,
                        "message": str(exc),
                    }
                )

        data = dump_validated(
            CheckResultData,
            {
                "lines": len(lines),
                "commands": commands,
                "count": len(issues),
                "healthy": not issues,
                "issues": issues,
            },
        )
        return ServiceResult(ok=True, op="check", data=data)


def _simulate_depend(registry: PackageRegistry, args: tuple[str, ...]) -> None:
    name, *deps = args
    for dep in deps:
        if registry.would_create_cycle(name, dep):
            raise DependencyCycleError(name, dep)
    pkg = registry.get(name)
    for dep in deps:
        pkg.add_dependency(registry.get(dep))
