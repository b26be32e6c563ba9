"""Command line interface for release-coordinator."""

from __future__ import annotations

from release_coordinator.cli.app import app, main

__all__ = ["app", "main"]
