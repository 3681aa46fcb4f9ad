"""Command-file reading.

Reads a whole command file up front so a missing or empty file is
reported before any command runs.
"""

from __future__ import annotations

from pathlib import Path

from depctl.domain.errors import CommandFileError


def read_command_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Return the lines of the command file at *path*, without line endings.

    Lines break on LF only, and a CR right before it is dropped.  Other
    characters that Python treats as line boundaries stay inside the line.

    Raises:
        CommandFileError: The file cannot be read, or is empty.
    """
    try:
        with path.open(encoding=encoding, newline="") as fh:
            raw = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CommandFileError(f"Cannot read {path}: {exc}") from exc

    if not raw:
        raise CommandFileError("File is empty")
    lines = [line.removesuffix("\r") for line in raw.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines
