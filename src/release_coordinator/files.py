"""Text file helpers for in-place edits.

Files are read and written with ``newline=""`` so CRLF and LF line
endings survive an edit unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_coordinator.exceptions import CommandError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["detect_newline", "read_text", "write_text"]


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read path without translating line endings.

    Raises:
        CommandError: If the file cannot be read or decoded
    """
    try:
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as e:
        raise CommandError(f"Could not decode {path} as {encoding}: {e.reason}") from e
    except OSError as e:
        raise CommandError(f"Could not read {path}: {e}") from e


def write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write content to path exactly as given.

    Raises:
        CommandError: If the file cannot be written
    """
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError as e:
        raise CommandError(f"Could not write {path}: {e}") from e


def detect_newline(content: str) -> str:
    """Return the line ending used by content, LF when there is none."""
    return "\r\n" if "\r\n" in content else "\n"
