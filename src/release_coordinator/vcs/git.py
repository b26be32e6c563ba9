"""Git repository access via the git command line.

Every operation shells out to ``git`` and blocks until it finishes.
Failures raise CommandError with the command's exit code and stderr.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from release_coordinator.exceptions import CommandError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)

_IDENTITY_UNKNOWN = "Please tell me who you are"

IDENTITY_HINT = (
    "Set user_name and user_email under [tool.release-coordinator.git] in pyproject.toml, "
    "e.g. github-actions[bot] / github-actions[bot]@users.noreply.github.com for CI."
)


class GitRepository:
    """A git working tree at a given path."""

    def __init__(self, path: Path, *, strict_tag_lookup: bool = False) -> None:
        if not path.is_dir():
            raise CommandError(f"Repository path is not a directory: {path}")
        self.path = path
        self.strict_tag_lookup = strict_tag_lookup

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        """Run a git command in the repository.

        Args:
            *args: Arguments passed to git
            check: Raise CommandError on a non-zero exit code

        Returns:
            The completed process

        Raises:
            CommandError: If git is missing, or exits non-zero and check is set
        """
        command = ["git", *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self.path,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandError("git not found. Is it installed and on PATH?", command="git") from e

        if check and result.returncode != 0:
            raise CommandError(
                f"git {args[0]} failed with exit code {result.returncode}",
                command=" ".join(command),
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def configure_identity(self, name: str, email: str) -> None:
        """Set the committer identity for this repository only."""
        self._run("config", "user.name", name)
        self._run("config", "user.email", email)

    def tag_exists(self, tag: str) -> bool:
        """Check whether a tag exists locally.

        A failed lookup (anything other than "found" or "not found") counts
        as a missing tag unless strict_tag_lookup is set, in which case it
        raises CommandError.
        """
        try:
            result = self._run("rev-parse", "--verify", "--quiet", f"refs/tags/{tag}", check=False)
        except CommandError:
            if self.strict_tag_lookup:
                raise
            logger.warning("Tag lookup for %s failed; assuming the tag does not exist", tag)
            return False

        if result.returncode == 0:
            return True
        if result.returncode == 1:
            return False

        if self.strict_tag_lookup:
            raise CommandError(
                f"Could not check whether tag {tag} exists (exit code {result.returncode})",
                command=f"git rev-parse --verify --quiet refs/tags/{tag}",
                returncode=result.returncode,
                stderr=result.stderr,
            )
        logger.warning(
            "Tag lookup for %s failed with exit code %d; assuming the tag does not exist",
            tag,
            result.returncode,
        )
        return False

    def stage_files(self, paths: Sequence[Path]) -> None:
        if not paths:
            return
        self._run("add", "--", *(str(p) for p in paths))

    def has_staged_changes(self) -> bool:
        """Return True if the index differs from HEAD."""
        result = self._run("diff", "--cached", "--quiet", check=False)
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise CommandError(
            f"git diff failed with exit code {result.returncode}",
            command="git diff --cached --quiet",
            returncode=result.returncode,
            stderr=result.stderr,
        )

    def commit(self, message: str) -> None:
        """Commit the staged changes.

        Raises:
            CommandError: If the commit fails. A missing committer identity
                gets a hint naming the configuration that sets one.
        """
        try:
            self._run("commit", "-m", message)
        except CommandError as e:
            if e.stderr and _IDENTITY_UNKNOWN in e.stderr:
                raise CommandError(
                    f"{e.message}: git has no committer identity. {IDENTITY_HINT}",
                    command=e.command,
                    returncode=e.returncode,
                    stderr=e.stderr,
                ) from e
            raise

    def create_tag(self, tag: str, message: str) -> None:
        """Create an annotated tag at HEAD."""
        self._run("tag", "-a", tag, "-m", message)

    def push(self) -> None:
        self._run("push")

    def push_tags(self) -> None:
        self._run("push", "--tags")
