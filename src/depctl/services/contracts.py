"""Typed payload contracts for service results.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``items`` vs ``outcomes``)
fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from depctl.domain.outcomes import RemoveStatus

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class DependResultData(BaseModel):
    """Payload contract for DEPEND."""

    package: str
    dependencies: list[str]


class InstallItem(BaseModel):
    """One package reported by INSTALL."""

    name: str
    already_installed: bool


class InstallResultData(BaseModel):
    """Payload contract for INSTALL."""

    package: str
    count: int
    items: list[InstallItem]


class RemoveItem(BaseModel):
    """One package reported by REMOVE."""

    name: str
    status: RemoveStatus


class RemoveResultData(BaseModel):
    """Payload contract for REMOVE."""

    package: str
    count: int
    items: list[RemoveItem]


class ListResultData(BaseModel):
    """Payload contract for LIST."""

    count: int
    items: list[str]


class EndResultData(BaseModel):
    """Payload contract for END."""

    state: str


class CheckIssue(BaseModel):
    """One problem found by the static command-file check."""

    line_number: int
    line: str
    code: str
    message: str


class CheckResultData(BaseModel):
    """Payload contract for ``CheckService.check``."""

    lines: int
    commands: int
    count: int
    healthy: bool
    issues: list[CheckIssue]
