"""Machine-readable run outputs.

Outputs are ``key=value`` lines appended to the CI output file (GitHub
Actions exposes its path as ``GITHUB_OUTPUT``) and echoed to the console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_coordinator.exceptions import CommandError

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console


def format_output_value(value: str | bool) -> str:
    """Render an output value; booleans become lowercase true/false."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class OutputChannel:
    """Publishes run outputs to an optional CI output file and the console."""

    def __init__(self, output_file: Path | None, console: Console) -> None:
        self.output_file = output_file
        self.console = console

    def set(self, key: str, value: str | bool) -> None:
        text = format_output_value(value)
        if self.output_file is not None:
            try:
                with self.output_file.open("a", encoding="utf-8") as fh:
                    fh.write(f"{key}={text}\n")
            except OSError as e:
                raise CommandError(
                    f"Could not write output {key} to {self.output_file}: {e}"
                ) from e
        self.console.print(f"Output: {key}={text}", markup=False, highlight=False)
