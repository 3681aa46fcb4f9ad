"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Outcome lines are indented by ``indent`` spaces, matching the classic
package-manager transcript::

    INSTALL TELNET
       Installing NETCARD
       Installing TELNET

The echoed command line itself is written by the CLI, not here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from depctl.domain.outcomes import RemoveStatus
from depctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from depctl.services.result import ServiceResult


# Every RemoveStatus member must appear here.
REMOVE_MESSAGES: dict[RemoveStatus, tuple[str, str]] = {
    RemoveStatus.REMOVED: ("Removing {name}", "dep.removed"),
    RemoveStatus.NOT_REMOVED_STILL_NEEDED: ("{name} is still needed.", "dep.unchanged"),
    RemoveStatus.NOT_REMOVED_NOT_INSTALLED: ("{name} is not installed", "dep.unchanged"),
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, indent: int = 3) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    Returns an empty string for operations that print nothing.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, pad=" " * indent, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Only the names that changed state (or, for LIST, the installed names)
    are printed, one per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items", [])
    if result.op == "list":
        return "\n".join(str(name) for name in items)
    if result.op == "install":
        return "\n".join(i["name"] for i in items if not i.get("already_installed"))
    if result.op == "remove":
        return "\n".join(i["name"] for i in items if i.get("status") == RemoveStatus.REMOVED)
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, pad: str, message: str, style: str) -> None:
    # Text keeps package names out of Rich markup parsing.
    console.print(Text(pad + message, style=style))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dep.error")
    op = Text(f"  {result.op}", style="dep.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dep.key"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Command renderers ─────────────────────────────────────────────────


def _render_silent(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    """DEPEND and END print nothing beyond the echoed line."""


def _render_install(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    for item in result.data.get("items", []):
        name = str(item["name"])
        if item.get("already_installed"):
            _line(console, pad, f"{name} is already installed.", "dep.unchanged")
        else:
            _line(console, pad, f"Installing {name}", "dep.installed")


def _render_remove(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    for item in result.data.get("items", []):
        template, style = REMOVE_MESSAGES[RemoveStatus(item["status"])]
        _line(console, pad, template.format(name=item["name"]), style)


def _render_list(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    for name in result.data.get("items", []):
        _line(console, pad, str(name), "dep.package")


def _render_check(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    """Render check results, one issue per line."""
    d = result.data
    issues: list[dict[str, Any]] = d.get("issues", [])
    if not issues:
        console.print(
            Text("OK", style="dep.ok"),
            Text(f" {d.get('commands', 0)} commands, no issues found."),
        )
        return

    for issue in issues:
        console.print(
            Text(f"line {issue['line_number']}", style="dep.key"),
            Text(f"[{issue['code']}]", style="dep.error"),
            Text(str(issue["message"])),
        )
        if verbose:
            console.print(Text(f"{pad}{issue['line']}", style="dep.line"))
    console.print(Text(f"\n{len(issues)} issues in {d.get('lines', 0)} lines"))


def _render_generic(result: ServiceResult, console: Console, *, pad: str, verbose: bool) -> None:
    """Fallback: status line plus key-value fields."""
    console.print(Text("OK", style="dep.ok"), Text(f"  {result.op}", style="dep.op"))
    for key, value in result.data.items():
        console.print(Text(f"{pad}{key}: ", style="dep.key"), Text(str(value)), sep="")


_OP_RENDERERS: dict[str, Any] = {
    "depend": _render_silent,
    "install": _render_install,
    "remove": _render_remove,
    "list": _render_list,
    "end": _render_silent,
    "check": _render_check,
}
