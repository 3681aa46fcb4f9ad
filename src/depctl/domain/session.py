"""Session states for a command stream.

A session starts out accepting DEPEND commands.  The first command of any
other kind closes the DEPEND phase for good, and END closes the session.
Transitions are monotonic: no state is ever revisited.
"""

from __future__ import annotations

from enum import StrEnum


class SessionState(StrEnum):
    """Where a command stream currently stands."""

    ACCEPTING_DEPENDS = "accepting_depends"
    ACCEPTING_COMMANDS = "accepting_commands"
    ENDED = "ended"


# A state may also "transition" to itself; only backwards moves are illegal.
SESSION_TRANSITIONS: dict[str, list[str]] = {
    "accepting_depends": ["accepting_depends", "accepting_commands", "ended"],
    "accepting_commands": ["accepting_commands", "ended"],
    "ended": [],
}


def is_valid_transition(current: str, target: str) -> bool:
    """Check if moving from *current* to *target* is allowed."""
    return target in SESSION_TRANSITIONS.get(current, [])
