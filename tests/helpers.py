"""Test doubles and sample documents shared across the test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from release_coordinator.exceptions import CommandError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

DESCRIPTOR = """\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
    <Version>1.2.3</Version>
  </PropertyGroup>
</Project>
"""

CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

## [1.2.3] - 2024-01-01

- Initial release
"""

RELEASE_DATE = date(2024, 6, 1)


@dataclass
class FakeVersionControl:
    """In-memory VersionControl recording every call."""

    tags: set[str] = field(default_factory=set)
    staged_changes: bool = True
    calls: list[tuple[str, ...]] = field(default_factory=list)
    staged: list[Path] = field(default_factory=list)
    fail_on: str | None = None

    def _record(self, name: str, *args: str) -> None:
        if name == self.fail_on:
            raise CommandError(f"git {name} failed with exit code 1", returncode=1)
        self.calls.append((name, *args))

    def configure_identity(self, name: str, email: str) -> None:
        self._record("configure_identity", name, email)

    def tag_exists(self, tag: str) -> bool:
        self._record("tag_exists", tag)
        return tag in self.tags

    def stage_files(self, paths: Sequence[Path]) -> None:
        self._record("stage_files", *(p.name for p in paths))
        self.staged.extend(paths)

    def has_staged_changes(self) -> bool:
        self._record("has_staged_changes")
        return self.staged_changes

    def commit(self, message: str) -> None:
        self._record("commit", message)

    def create_tag(self, tag: str, message: str) -> None:
        self._record("create_tag", tag, message)
        self.tags.add(tag)

    def push(self) -> None:
        self._record("push")

    def push_tags(self) -> None:
        self._record("push_tags")

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]
