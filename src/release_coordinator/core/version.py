"""Semantic version model.

Only plain ``major.minor.patch`` triples are supported; pre-release and
build metadata are not part of the release flow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from release_coordinator.exceptions import ParseError, ValidationError

VERSION_PATTERN = r"(\d+)\.(\d+)\.(\d+)"

_VERSION_RE = re.compile(rf"^{VERSION_PATTERN}$")


class BumpType(StrEnum):
    """Which version component a release increments."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def parse(cls, value: str | None) -> BumpType:
        """Parse a bump kind given on the command line.

        Raises:
            ValidationError: If value is not one of major, minor, patch
        """
        try:
            return cls(value)
        except ValueError as e:
            choices = ", ".join(member.value for member in cls)
            raise ValidationError(f"Invalid bump type {value!r}. Expected one of: {choices}") from e


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """An immutable ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ParseError(f"Version components must be non-negative: {self}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for the given bump type.

        Lower-order components are reset to zero.
        """
        match bump_type:
            case BumpType.MAJOR:
                return Version(self.major + 1, 0, 0)
            case BumpType.MINOR:
                return Version(self.major, self.minor + 1, 0)
            case BumpType.PATCH:
                return Version(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump type: {bump_type}")

    def tag_name(self, prefix: str = "v") -> str:
        return f"{prefix}{self}"


def parse_version(text: str) -> Version:
    """Parse a strict ``X.Y.Z`` version string.

    Raises:
        ParseError: If text is not a plain semantic version
    """
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise ParseError(f"Invalid version: {text!r}. Expected MAJOR.MINOR.PATCH")
    return Version(int(match.group(1)), int(match.group(2)), int(match.group(3)))
