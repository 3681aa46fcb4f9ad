"""BaseService — abstract foundation for all depctl services.

Every service receives a :class:`PackageSystem` at construction time.
The system provides the package registry and the installer; services
never create their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depctl.infrastructure.system import PackageSystem


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CommandService(BaseService):
            def execute(self, line: str) -> ServiceResult:
                registry = self._system.registry
                ...
    """

    def __init__(self, system: PackageSystem) -> None:
        self._system = system
