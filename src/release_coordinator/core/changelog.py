"""Changelog assembly from fragment files.

Each pending change is described by a small Markdown file in a
fragments directory (``changelog.d/`` by default). At release time the
fragments are folded into a single dated entry which is inserted above
the newest existing entry of the changelog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from release_coordinator.exceptions import CommandError
from release_coordinator.files import detect_newline, read_text, write_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date
    from pathlib import Path

    from release_coordinator.core.version import Version

logger = logging.getLogger(__name__)

ENTRY_HEADING_PREFIX = "## ["


@dataclass(frozen=True, slots=True)
class ChangelogFragment:
    """One pending change note, already whitespace-trimmed."""

    name: str
    text: str


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    """A dated changelog section for one release."""

    version: Version
    released_on: date
    body: str

    @property
    def heading(self) -> str:
        return f"{ENTRY_HEADING_PREFIX}{self.version}] - {self.released_on.isoformat()}"

    def render(self) -> str:
        """Render the entry, surrounded by the blank lines used as separators."""
        return f"\n{self.heading}\n\n{self.body}\n"


def collect_fragments(
    directory: Path,
    *,
    index_name: str = "README.md",
    suffix: str = ".md",
) -> list[ChangelogFragment]:
    """Read pending fragments from directory.

    Args:
        directory: Fragments directory
        index_name: Reserved file describing the directory, never a fragment
        suffix: Only files with this suffix are fragments

    Returns:
        Non-empty fragments sorted by file name. Empty when the directory
        does not exist.

    Raises:
        CommandError: If a fragment cannot be read
    """
    if not directory.is_dir():
        logger.debug("No fragments directory at %s", directory)
        return []

    fragments: list[ChangelogFragment] = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.is_file() or path.name == index_name or not path.name.endswith(suffix):
            continue
        try:
            text = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f"Could not read changelog fragment {path}: {e}") from e
        if text:
            fragments.append(ChangelogFragment(name=path.name, text=text))
        else:
            logger.debug("Skipping empty fragment %s", path.name)

    return fragments


def build_changelog_entry(
    version: Version,
    released_on: date,
    fragments: Sequence[ChangelogFragment],
) -> ChangelogEntry:
    """Combine fragments into one entry, separated by blank lines."""
    return ChangelogEntry(
        version=version,
        released_on=released_on,
        body="\n\n".join(fragment.text for fragment in fragments),
    )


def insert_entry(existing: str, entry: ChangelogEntry) -> str:
    """Insert entry before the newest existing entry heading.

    If the changelog has no ``## [`` heading yet, the entry is appended.
    The entry uses the changelog's own line ending (CRLF or LF).
    """
    newline = detect_newline(existing)
    rendered = entry.render().replace("\n", newline)
    lines = existing.split(newline)
    for index, line in enumerate(lines):
        if line.startswith(ENTRY_HEADING_PREFIX):
            lines.insert(index, rendered)
            return newline.join(lines)
    return existing + rendered


def collect_changelog(
    version: Version,
    released_on: date,
    *,
    fragments_dir: Path,
    changelog_path: Path,
    index_name: str = "README.md",
    suffix: str = ".md",
) -> int:
    """Fold pending fragments into the changelog file.

    Args:
        version: Version being released
        released_on: Release date for the entry heading
        fragments_dir: Directory holding fragment files
        changelog_path: Changelog to update in place
        index_name: Reserved index file in fragments_dir
        suffix: Fragment file suffix

    Returns:
        Number of fragments written to the changelog (0 when nothing changed)

    Raises:
        CommandError: If a fragment or the changelog cannot be read or written
    """
    fragments = collect_fragments(fragments_dir, index_name=index_name, suffix=suffix)
    if not fragments:
        return 0

    if not changelog_path.is_file():
        logger.warning(
            "Found %d changelog fragment(s) but %s does not exist; changelog not updated",
            len(fragments),
            changelog_path,
        )
        return 0

    entry = build_changelog_entry(version, released_on, fragments)
    content = read_text(changelog_path)
    write_text(changelog_path, insert_entry(content, entry))

    logger.info("Collected %d changelog fragment(s)", len(fragments))
    return len(fragments)
