"""Version control access for the release flow."""

from __future__ import annotations

from release_coordinator.vcs.base import VersionControl
from release_coordinator.vcs.git import GitRepository

__all__ = ["GitRepository", "VersionControl"]
