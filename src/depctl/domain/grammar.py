"""Command-line grammar — keywords, arity rules, and tokenizing.

Pure functions, no infrastructure dependencies.  A command line is a
case-insensitive keyword followed by whitespace-separated package names::

    DEPEND TELNET TCPIP NETCARD
    INSTALL TELNET
    REMOVE NETCARD
    LIST
    END
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from depctl.domain.errors import ArgumentCountError, UnknownCommandError


class CommandName(StrEnum):
    """Recognized command keywords."""

    DEPEND = "DEPEND"
    INSTALL = "INSTALL"
    REMOVE = "REMOVE"
    LIST = "LIST"
    END = "END"


@dataclass(frozen=True)
class Arity:
    """Argument count rule for one command."""

    count: int
    exact: bool

    def accepts(self, n: int) -> bool:
        return n == self.count if self.exact else n >= self.count


COMMAND_ARITY: dict[CommandName, Arity] = {
    CommandName.DEPEND: Arity(2, exact=False),
    CommandName.INSTALL: Arity(1, exact=True),
    CommandName.REMOVE: Arity(1, exact=True),
    CommandName.LIST: Arity(0, exact=True),
    CommandName.END: Arity(0, exact=True),
}


@dataclass(frozen=True)
class ParsedCommand:
    """A validated command line."""

    name: CommandName
    args: tuple[str, ...]
    line: str  # original text, trailing whitespace stripped


def tokenize(line: str) -> list[str]:
    """Split a command line on runs of whitespace."""
    return line.split()


def parse_command(line: str) -> ParsedCommand | None:
    """Parse and validate one command line.

    Returns None for blank or whitespace-only lines.  Package names keep
    their case; only the keyword is case-insensitive.

    Raises:
        UnknownCommandError: The keyword is not a :class:`CommandName`.
        ArgumentCountError: The argument count violates :data:`COMMAND_ARITY`.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    keyword, *args = tokens
    try:
        name = CommandName(keyword.upper())
    except ValueError:
        raise UnknownCommandError(keyword.upper()) from None

    arity = COMMAND_ARITY[name]
    if not arity.accepts(len(args)):
        raise ArgumentCountError(str(name), arity.count, exact=arity.exact)

    return ParsedCommand(name=name, args=tuple(args), line=line.rstrip())
