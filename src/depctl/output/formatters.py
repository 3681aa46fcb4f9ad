"""Output-mode dispatch.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet),
or for machines (--json, one compact JSON document per line so a whole
run reads as JSON Lines).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from depctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from depctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output-mode flags resolved from settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 3


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, and quiet wins over the default human output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json()
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, indent=settings.indent)
