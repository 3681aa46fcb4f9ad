"""DependencyManager — DEPEND/INSTALL/REMOVE/LIST/END semantics.

The manager walks the package graph and drives the installer.  It is the
only place that decides whether a package may be installed or removed.

Protection rules:

- A package installed by an explicit INSTALL is *protected*: it is only
  removed by an explicit REMOVE, never as a side effect of removing the
  packages that depend on it.
- A package installed as a dependency is unprotected until it becomes the
  target of an explicit INSTALL.
- An explicit REMOVE clears protection before deciding removability, so a
  protected package that is still needed becomes eligible for implicit
  removal later.

Core operations return plain outcome lists and raise :class:`DepctlError`
subclasses; :class:`~depctl.services.commands.CommandService` wraps them
in ServiceResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from depctl.domain.errors import DependencyCycleError, SequenceError
from depctl.domain.outcomes import InstallOutcome, RemoveOutcome, RemoveStatus
from depctl.domain.session import SessionState, is_valid_transition
from depctl.services.base import BaseService

if TYPE_CHECKING:
    from depctl.infrastructure.graph.registry import Package, PackageRegistry
    from depctl.infrastructure.installer import Installer
    from depctl.infrastructure.system import PackageSystem

logger = logging.getLogger(__name__)


class DependencyManager(BaseService):
    """Session state machine over one :class:`PackageSystem`."""

    def __init__(self, system: PackageSystem) -> None:
        super().__init__(system)
        self._state = SessionState.ACCEPTING_DEPENDS

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def registry(self) -> PackageRegistry:
        return self._system.registry

    @property
    def installer(self) -> Installer:
        return self._system.installer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def specify_dependencies(self, name: str, dep_names: Iterable[str]) -> None:
        """Record that *name* depends on every package in *dep_names*.

        Only legal before any other command has been processed.  The whole
        call is rejected, with no edges added, if any new edge would make
        the graph cyclic.
        """
        self._check_not_ended()
        if self._state is not SessionState.ACCEPTING_DEPENDS:
            raise SequenceError(
                "DEPEND command cannot be issued once other commands have been issued."
            )

        dep_names = list(dep_names)
        for dep_name in dep_names:
            if self.registry.would_create_cycle(name, dep_name):
                raise DependencyCycleError(name, dep_name)

        pkg = self.registry.get(name)
        for dep_name in dep_names:
            pkg.add_dependency(self.registry.get(dep_name))

    def install(self, name: str) -> list[InstallOutcome]:
        """Install *name* and, first, everything it transitively depends on.

        Returns outcomes in depth-first post-order: dependencies before the
        package that needs them.  Already-installed dependencies are not
        reported; the explicitly requested package always is.
        """
        self._begin_command()
        pkg = self.registry.get(name)
        return self._install_tree(pkg)

    def remove(self, name: str) -> list[RemoveOutcome]:
        """Remove *name* if nothing installed needs it, then try its dependencies.

        Returns outcomes in pre-order: the package before its dependencies.
        The explicitly requested package is always reported; dependencies
        are reported only when actually removed.  An unknown package is
        reported as not installed.
        """
        self._begin_command()
        pkg = self.registry.find(name)
        if pkg is None:
            return [RemoveOutcome(name, RemoveStatus.NOT_REMOVED_NOT_INSTALLED)]
        return self._remove_tree(pkg)

    def list_installed(self) -> list[str]:
        """Installed package names, sorted ascending."""
        self._begin_command()
        return sorted(self.installer.installed_names())

    def end(self) -> None:
        """Close the session; every later command raises SequenceError."""
        self._check_not_ended()
        self._transition(SessionState.ENDED)

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def _install_tree(self, root: Package) -> list[InstallOutcome]:
        """Post-order walk: every dependency is handled before its dependent.

        A shared dependency reached again below the root has nothing left to
        do, so each package is expanded at most once per call.
        """
        outcomes: list[InstallOutcome] = []
        seen: set[str] = set()
        # (package, depth, dependencies already pushed)
        stack: list[tuple[Package, int, bool]] = [(root, 0, False)]
        while stack:
            pkg, depth, expanded = stack.pop()
            if expanded:
                self._install_one(pkg, outcomes, explicit=depth == 0)
                continue
            if pkg.name in seen:
                continue
            seen.add(pkg.name)
            stack.append((pkg, depth, True))
            stack.extend((dep, depth + 1, False) for dep in reversed(pkg.dependencies))
        return outcomes

    def _install_one(self, pkg: Package, outcomes: list[InstallOutcome], *, explicit: bool) -> None:
        already_installed = self.installer.is_installed(pkg.name)
        if not already_installed:
            self.installer.install(pkg, protect=explicit)
        elif not self.installer.is_protected(pkg.name):
            # Promote only on an explicit request; a protected package stays protected.
            self.installer.set_protected(pkg.name, explicit)

        if explicit or not already_installed:
            outcomes.append(InstallOutcome(pkg.name, already_installed))

    def _remove_tree(self, root: Package) -> list[RemoveOutcome]:
        """Pre-order walk: a package is considered before its dependencies.

        A shared dependency is reconsidered on every path that reaches it; it
        becomes removable once its last installed dependent is gone.
        """
        outcomes: list[RemoveOutcome] = []
        stack: list[tuple[Package, int]] = [(root, 0)]
        while stack:
            pkg, depth = stack.pop()
            explicit = depth == 0
            status = self._remove_one(pkg, explicit=explicit)
            if explicit or status is RemoveStatus.REMOVED:
                outcomes.append(RemoveOutcome(pkg.name, status))
            # Dependencies are considered whether or not this package went away.
            stack.extend((dep, depth + 1) for dep in reversed(pkg.dependencies))
        return outcomes

    def _remove_one(self, pkg: Package, *, explicit: bool) -> RemoveStatus:
        installer = self.installer
        if not installer.is_installed(pkg.name):
            return RemoveStatus.NOT_REMOVED_NOT_INSTALLED

        if explicit and installer.is_protected(pkg.name):
            installer.set_protected(pkg.name, False)

        if self._has_installed_dependents(pkg):
            return RemoveStatus.NOT_REMOVED_STILL_NEEDED
        # Implicit removal of a protected package is reported as "still needed" too.
        if not explicit and installer.is_protected(pkg.name):
            return RemoveStatus.NOT_REMOVED_STILL_NEEDED

        installer.remove(pkg.name)
        return RemoveStatus.REMOVED

    def _has_installed_dependents(self, pkg: Package) -> bool:
        return any(self.installer.is_installed(d.name) for d in pkg.dependents)

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    def _check_not_ended(self) -> None:
        if self._state is SessionState.ENDED:
            raise SequenceError("No commands may be issued after END.")

    def _begin_command(self) -> None:
        self._check_not_ended()
        self._transition(SessionState.ACCEPTING_COMMANDS)

    def _transition(self, target: SessionState) -> None:
        if not is_valid_transition(self._state, target):
            raise SequenceError(f"Cannot move session from {self._state} to {target}.")
        if target is not self._state:
            logger.debug("Session state %s -> %s", self._state, target)
        self._state = target
