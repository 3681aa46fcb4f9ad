"""Error hierarchy for depctl.

Every error carries a stable ``code`` that the service layer copies into
``ServiceError.code``.  All errors are fatal for the command batch: the
CLI reports the first one and stops processing further lines.
"""

from __future__ import annotations


class DepctlError(Exception):
    """Base class for all depctl errors."""

    code = "DEPCTL_ERROR"


class SequenceError(DepctlError):
    """A command was issued in a session state that does not accept it."""

    code = "SEQUENCE_ERROR"


class ArgumentCountError(DepctlError):
    """A command line carried the wrong number of arguments."""

    code = "ARGUMENT_COUNT"

    def __init__(self, command: str, expected: int, *, exact: bool) -> None:
        qualifier = "exactly" if exact else "at least"
        super().__init__(f"The {command} command requires {qualifier} {expected} argument(s).")
        self.command = command
        self.expected = expected
        self.exact = exact


class UnknownCommandError(DepctlError):
    """A command line started with an unrecognized keyword."""

    code = "UNKNOWN_COMMAND"

    def __init__(self, command: str) -> None:
        super().__init__(f'Command "{command}" not recognized; cannot continue.')
        self.command = command


class DependencyCycleError(DepctlError):
    """A DEPEND command would make the dependency graph cyclic."""

    code = "DEPENDENCY_CYCLE"

    def __init__(self, package: str, dependency: str) -> None:
        super().__init__(
            f'Cannot make "{package}" depend on "{dependency}": '
            f'"{dependency}" already depends on "{package}".'
        )
        self.package = package
        self.dependency = dependency


class AlreadyInstalledError(DepctlError):
    """The installer was asked to install a package that is already installed."""

    code = "ALREADY_INSTALLED"


class NotInstalledError(DepctlError):
    """The installer was asked about a package that is not installed."""

    code = "NOT_INSTALLED"


class CommandFileError(DepctlError):
    """The command file could not be read, or was empty."""

    code = "READ_ERROR"
