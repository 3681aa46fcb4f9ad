"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All public command-service methods return ServiceResult.
The CLI and the renderers consume this type; the dependency manager
underneath returns plain outcome records and raises on failure.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from depctl.domain.errors import DepctlError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DepctlError, **detail: Any) -> ServiceError:
        """Build an error payload from a raised :class:`DepctlError`."""
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"install"``, ``"remove"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (line numbers, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
