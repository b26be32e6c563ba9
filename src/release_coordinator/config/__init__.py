"""Configuration management for release-coordinator."""

from __future__ import annotations

from release_coordinator.config.loader import load_config
from release_coordinator.config.models import CoordinatorConfig, GitIdentityConfig

__all__ = [
    "CoordinatorConfig",
    "GitIdentityConfig",
    "load_config",
]
