"""Exception hierarchy for release-coordinator.

All errors raised by the package derive from ReleaseCoordinatorError,
so the CLI can report any of them with a single handler.
"""

from __future__ import annotations


class ReleaseCoordinatorError(Exception):
    """Base exception for all release-coordinator errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(ReleaseCoordinatorError):
    """A version string or version field could not be parsed."""


class CommandError(ReleaseCoordinatorError):
    """An external command (git, filesystem) failed."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        if self.stderr and self.stderr.strip():
            return f"{self.message}\n{self.stderr.strip()}"
        return self.message


class ValidationError(ReleaseCoordinatorError):
    """User input (CLI arguments, bump kind) is invalid."""


class ConfigError(ValidationError):
    """The [tool.release-coordinator] configuration is unreadable or invalid."""
