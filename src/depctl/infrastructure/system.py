"""PackageSystem — the single dependency injected into every service.

Owns one :class:`PackageRegistry` and one :class:`Installer` for the life
of a run.  Nothing is process-global: two systems never share packages
or installed state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from depctl.infrastructure.graph.registry import PackageRegistry
from depctl.infrastructure.installer import Installer

if TYPE_CHECKING:
    from depctl.config.settings import DepctlSettings


class PackageSystem:
    """Registry plus installed set for one simulated host."""

    def __init__(self, settings: DepctlSettings | None = None) -> None:
        self.settings = settings
        self.registry = PackageRegistry()
        self.installer = Installer()
