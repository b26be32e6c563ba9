"""Version field manipulation in the project descriptor.

The descriptor is an XML-like project file carrying a single
``<Version>X.Y.Z</Version>`` element. Edits are regex-based so the
rest of the file keeps its formatting byte for byte.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from release_coordinator.core.version import VERSION_PATTERN, Version
from release_coordinator.exceptions import ParseError
from release_coordinator.files import read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_VERSION_FIELD_RE = re.compile(rf"<Version>{VERSION_PATTERN}</Version>")
_ANY_VERSION_FIELD_RE = re.compile(r"<Version>[^<]+</Version>")


def parse_current_version(document: str) -> Version:
    """Extract the version from descriptor content.

    Args:
        document: Full descriptor text

    Returns:
        The first ``<Version>X.Y.Z</Version>`` value found

    Raises:
        ParseError: If no well-formed version field is present
    """
    match = _VERSION_FIELD_RE.search(document)
    if match is None:
        raise ParseError(
            "Could not parse version from descriptor. Expected <Version>X.Y.Z</Version>."
        )
    return Version(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def rewrite_version_field(document: str, new_version: Version) -> str:
    """Replace the first version field with new_version.

    Only the first occurrence is rewritten; additional fields are left alone.

    Raises:
        ParseError: If the document has no version field
    """
    new_document, count = _ANY_VERSION_FIELD_RE.subn(
        f"<Version>{new_version}</Version>",
        document,
        count=1,
    )
    if count == 0:
        raise ParseError("Could not find a <Version> field to update.")
    return new_document


def read_descriptor_version(path: Path) -> Version:
    """Read the current version from the descriptor file at path.

    Raises:
        ParseError: If the file is missing or has no version field
        CommandError: If the file cannot be read or is not valid UTF-8
    """
    if not path.is_file():
        raise ParseError(f"Version descriptor not found: {path}")
    content = read_text(path)
    try:
        return parse_current_version(content)
    except ParseError as e:
        raise ParseError(f"{e.message} ({path})") from e


def update_descriptor_version(path: Path, new_version: Version) -> Path:
    """Rewrite the version field of the descriptor file in place.

    Line endings and all text outside the version field are kept as is.

    Returns:
        Path to the updated descriptor

    Raises:
        ParseError: If the file is missing or has no version field
        CommandError: If the file cannot be read or written
    """
    if not path.is_file():
        raise ParseError(f"Version descriptor not found: {path}")

    content = read_text(path)
    write_text(path, rewrite_version_field(content, new_version))
    logger.info("Updated %s to version %s", path.name, new_version)
    return path
