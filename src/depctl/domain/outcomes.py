"""Outcome records returned by INSTALL and REMOVE.

The manager emits one record per reported package, in traversal order.
Renderers map every :class:`RemoveStatus` member to a message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RemoveStatus(StrEnum):
    """Result of considering one package for removal."""

    REMOVED = "removed"
    NOT_REMOVED_STILL_NEEDED = "still_needed"
    NOT_REMOVED_NOT_INSTALLED = "not_installed"


@dataclass(frozen=True)
class InstallOutcome:
    """One package reported by an INSTALL command."""

    name: str
    already_installed: bool


@dataclass(frozen=True)
class RemoveOutcome:
    """One package reported by a REMOVE command."""

    name: str
    status: RemoveStatus

    @property
    def removed(self) -> bool:
        return self.status is RemoveStatus.REMOVED
