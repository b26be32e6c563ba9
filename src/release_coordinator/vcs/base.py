"""The version control operations the release flow depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class VersionControl(Protocol):
    """Minimal capability surface used by run_release.

    GitRepository implements it against a real repository; tests use an
    in-memory fake.
    """

    def configure_identity(self, name: str, email: str) -> None: ...

    def tag_exists(self, tag: str) -> bool: ...

    def stage_files(self, paths: Sequence[Path]) -> None: ...

    def has_staged_changes(self) -> bool: ...

    def commit(self, message: str) -> None: ...

    def create_tag(self, tag: str, message: str) -> None: ...

    def push(self) -> None: ...

    def push_tags(self) -> None: ...
