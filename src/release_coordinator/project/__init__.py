"""Project descriptor handling."""

from __future__ import annotations

from release_coordinator.project.descriptor import (
    parse_current_version,
    read_descriptor_version,
    rewrite_version_field,
    update_descriptor_version,
)

__all__ = [
    "parse_current_version",
    "read_descriptor_version",
    "rewrite_version_field",
    "update_descriptor_version",
]
