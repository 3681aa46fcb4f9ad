"""Installer — the source of truth for what is installed and what is protected.

A production installer would touch the filesystem in :meth:`_do_install`
and :meth:`_do_remove`; here both only log.  The installer enforces no
dependency rules: deciding *whether* a removal is safe is the manager's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from depctl.domain.errors import AlreadyInstalledError, NotInstalledError

if TYPE_CHECKING:
    from depctl.infrastructure.graph.registry import Package

logger = logging.getLogger(__name__)


@dataclass
class _InstalledEntry:
    """Installed-set record for one package."""

    package: Package
    protected: bool  # only an explicit REMOVE may remove a protected package


class Installer:
    """Tracks installed packages and their protection flags."""

    def __init__(self) -> None:
        self._installed: dict[str, _InstalledEntry] = {}

    def is_installed(self, name: str) -> bool:
        return name in self._installed

    def install(self, pkg: Package, *, protect: bool) -> None:
        """Install *pkg*, recording whether it is protected from implicit removal.

        Raises:
            AlreadyInstalledError: *pkg* is already installed.
        """
        if self.is_installed(pkg.name):
            msg = f'Cannot install package "{pkg.name}" because it is already installed.'
            raise AlreadyInstalledError(msg)
        self._do_install(pkg)
        self._installed[pkg.name] = _InstalledEntry(package=pkg, protected=protect)

    def remove(self, name: str) -> None:
        """Remove the package called *name*.

        Raises:
            NotInstalledError: *name* is not installed.
        """
        entry = self._entry(name, f'Cannot remove package "{name}" because it is not installed.')
        self._do_remove(entry.package)
        del self._installed[name]

    def get_installed(self, name: str) -> Package:
        return self._entry(name, f'Cannot return package "{name}"; it is not installed.').package

    def is_protected(self, name: str) -> bool:
        return self._entry(name, f'Cannot continue; "{name}" is not installed.').protected

    def set_protected(self, name: str, protect: bool) -> None:
        entry = self._entry(name, f'Cannot continue; "{name}" is not installed.')
        if entry.protected != protect:
            logger.debug("Protection for %s set to %s", name, protect)
        entry.protected = protect

    def installed_names(self) -> list[str]:
        """Names of installed packages, in install order (unsorted)."""
        return list(self._installed)

    def _entry(self, name: str, message: str) -> _InstalledEntry:
        entry = self._installed.get(name)
        if entry is None:
            raise NotInstalledError(message)
        return entry

    # Filesystem side effects (simulated)

    def _do_install(self, pkg: Package) -> None:
        logger.debug("Installing %s", pkg.name)

    def _do_remove(self, pkg: Package) -> None:
        logger.debug("Removing %s", pkg.name)
