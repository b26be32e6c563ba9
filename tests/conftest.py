"""Shared fixtures for release-coordinator tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from release_coordinator.config.models import CoordinatorConfig
from release_coordinator.core.outputs import OutputChannel
from release_coordinator.core.release import ReleaseContext
from tests.helpers import CHANGELOG, DESCRIPTOR, RELEASE_DATE, FakeVersionControl

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with a descriptor, a changelog and an empty fragments dir."""
    descriptor = tmp_path / "src" / "MyPackage" / "MyPackage.csproj"
    descriptor.parent.mkdir(parents=True)
    descriptor.write_text(DESCRIPTOR, encoding="utf-8")

    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")

    fragments = tmp_path / "changelog.d"
    fragments.mkdir()
    (fragments / "README.md").write_text("Drop one Markdown file per change here.\n")
    return tmp_path


@pytest.fixture
def fake_vcs() -> FakeVersionControl:
    return FakeVersionControl()


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=200, color_system=None)


@pytest.fixture
def make_context(project: Path, fake_vcs: FakeVersionControl, console: Console):
    """Build a ReleaseContext for the project fixture."""

    def _make(output_file: Path | None = None, **overrides) -> ReleaseContext:
        config = CoordinatorConfig(project_root=project, output_file=output_file, **overrides)
        return ReleaseContext(
            config=config,
            vcs=fake_vcs,
            outputs=OutputChannel(config.output_file, console),
            today=lambda: RELEASE_DATE,
        )

    return _make
