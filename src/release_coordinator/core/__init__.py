"""Core business logic for release-coordinator.

- Semantic version parsing and bumping
- Changelog assembly from fragment files
- Run outputs for CI

Release orchestration lives in release_coordinator.core.release, which
also depends on the project descriptor module.
"""

from __future__ import annotations

from release_coordinator.core.changelog import (
    ChangelogEntry,
    ChangelogFragment,
    build_changelog_entry,
    collect_changelog,
    collect_fragments,
    insert_entry,
)
from release_coordinator.core.outputs import OutputChannel
from release_coordinator.core.version import BumpType, Version, parse_version

__all__ = [
    # Version
    "BumpType",
    # Changelog
    "ChangelogEntry",
    "ChangelogFragment",
    "OutputChannel",
    "Version",
    "build_changelog_entry",
    "collect_changelog",
    "collect_fragments",
    "insert_entry",
    "parse_version",
]
