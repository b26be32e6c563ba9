"""Release orchestration.

run_release bumps the version, folds changelog fragments into the
changelog and commits, tags and pushes the result. It is a linear
pipeline with two early exits:

- the target tag already exists (AlreadyReleased), nothing is touched;
- nothing ended up staged (NoChanges), no commit/tag/push happens.

Errors propagate to the caller. There is no rollback: if the push fails
after the commit and tag were created, the local repository keeps them
and re-running the push is up to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from release_coordinator.core.changelog import collect_changelog
from release_coordinator.project.descriptor import (
    read_descriptor_version,
    update_descriptor_version,
)

if TYPE_CHECKING:
    from pathlib import Path

    from release_coordinator.config.models import CoordinatorConfig
    from release_coordinator.core.outputs import OutputChannel
    from release_coordinator.core.version import BumpType, Version
    from release_coordinator.vcs.base import VersionControl

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Today's date in UTC, used for changelog entry headings."""
    return datetime.now(UTC).date()


@dataclass(frozen=True, slots=True)
class AlreadyReleased:
    """The tag for the target version exists; the run was a no-op."""

    version: Version

    def outputs(self) -> list[tuple[str, str | bool]]:
        return [("already_released", True), ("new_version", str(self.version))]


@dataclass(frozen=True, slots=True)
class NoChanges:
    """The version was bumped in the working tree but nothing was staged."""

    version: Version

    def outputs(self) -> list[tuple[str, str | bool]]:
        return [("version_committed", False), ("new_version", str(self.version))]


@dataclass(frozen=True, slots=True)
class Committed:
    """The release was committed, tagged and pushed."""

    version: Version

    def outputs(self) -> list[tuple[str, str | bool]]:
        return [("version_committed", True), ("new_version", str(self.version))]


RunOutcome = AlreadyReleased | NoChanges | Committed


@dataclass
class ReleaseContext:
    """Everything a release run touches, passed in explicitly."""

    config: CoordinatorConfig
    vcs: VersionControl
    outputs: OutputChannel
    today: Callable[[], date] = field(default=utc_today)


def release_commit_message(tag: str, description: str | None = None) -> str:
    """Build the release commit message, with description after a blank line."""
    message = f"chore: release {tag}"
    if description:
        message += f"\n\n{description}"
    return message


def release_tag_message(tag: str, description: str | None = None) -> str:
    """Build the annotated tag message, with description after a blank line."""
    message = f"Release {tag}"
    if description:
        message += f"\n\n{description}"
    return message


def _publish(outcome: RunOutcome, context: ReleaseContext) -> RunOutcome:
    for key, value in outcome.outputs():
        context.outputs.set(key, value)
    return outcome


def _files_to_stage(config: CoordinatorConfig) -> list[Path]:
    files = [config.effective_version_file]
    changelog = config.effective_changelog_path
    if changelog.is_file():
        files.append(changelog)
    else:
        logger.debug("No changelog at %s, staging the version file only", changelog)
    return files


def run_release(
    bump_type: BumpType,
    description: str | None,
    context: ReleaseContext,
) -> RunOutcome:
    """Run one release.

    Args:
        bump_type: Which version component to increment
        description: Optional text appended to the commit and tag messages
        context: Configuration, version control and output channel

    Returns:
        The outcome; its outputs have already been published

    Raises:
        ParseError: If the version descriptor is missing or malformed
        CommandError: If a git or file operation fails
    """
    config = context.config
    vcs = context.vcs

    if config.git.is_configured:
        vcs.configure_identity(config.git.user_name, config.git.user_email)

    current = read_descriptor_version(config.effective_version_file)
    new_version = current.bump(bump_type)
    tag = new_version.tag_name(config.tag_prefix)
    logger.info("Bumping %s -> %s (%s)", current, new_version, bump_type)

    if vcs.tag_exists(tag):
        logger.info("Tag %s already exists", tag)
        return _publish(AlreadyReleased(new_version), context)

    update_descriptor_version(config.effective_version_file, new_version)
    collect_changelog(
        new_version,
        context.today(),
        fragments_dir=config.effective_fragments_dir,
        changelog_path=config.effective_changelog_path,
        index_name=config.fragments_index,
        suffix=config.fragment_suffix,
    )

    vcs.stage_files(_files_to_stage(config))
    if not vcs.has_staged_changes():
        logger.info("No changes to commit")
        return _publish(NoChanges(new_version), context)

    vcs.commit(release_commit_message(tag, description))
    logger.info("Committed version %s", new_version)

    vcs.create_tag(tag, release_tag_message(tag, description))
    logger.info("Created tag %s", tag)

    vcs.push()
    vcs.push_tags()
    logger.info("Pushed changes and tags")

    return _publish(Committed(new_version), context)
