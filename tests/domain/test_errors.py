"""Tests for the error hierarchy."""

import pytest

from depctl.domain.errors import (
    AlreadyInstalledError,
    ArgumentCountError,
    CommandFileError,
    DependencyCycleError,
    DepctlError,
    NotInstalledError,
    SequenceError,
    UnknownCommandError,
)

ALL_ERRORS = [
    SequenceError,
    ArgumentCountError,
    UnknownCommandError,
    DependencyCycleError,
    AlreadyInstalledError,
    NotInstalledError,
    CommandFileError,
]


@pytest.mark.parametrize("error_cls", ALL_ERRORS, ids=lambda c: c.__name__)
def test_inherits_depctl_error(error_cls: type) -> None:
    assert issubclass(error_cls, DepctlError)


def test_codes_are_unique() -> None:
    codes = [cls.code for cls in ALL_ERRORS]
    assert len(set(codes)) == len(codes)


def test_argument_count_message() -> None:
    exc = ArgumentCountError("LIST", 0, exact=True)
    assert str(exc) == "The LIST command requires exactly 0 argument(s)."
    assert exc.command == "LIST"


def test_cycle_message_names_both_packages() -> None:
    exc = DependencyCycleError("A", "B")
    assert '"A"' in str(exc)
    assert '"B"' in str(exc)
