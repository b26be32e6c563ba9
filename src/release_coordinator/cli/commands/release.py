"""Implementation of the release command.

Turns package errors into console messages and exit code 1; every
completed outcome, including "already released" and "no changes",
exits 0.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from release_coordinator.config import load_config
from release_coordinator.core.outputs import OutputChannel
from release_coordinator.core.release import (
    AlreadyReleased,
    Committed,
    ReleaseContext,
    run_release,
)
from release_coordinator.core.version import BumpType
from release_coordinator.exceptions import ReleaseCoordinatorError, ValidationError
from release_coordinator.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

USAGE = "Usage: release-coordinator --bump-type <major|minor|patch> [--description <desc>]"


def run_release_command(
    bump_type: str | None,
    description: str | None,
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the release command.

    Args:
        bump_type: Raw --bump-type value, validated here
        description: Optional text for the commit and tag messages
        path: Optional path to the project root
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        bump = BumpType.parse(bump_type)
    except ValidationError as e:
        err_console.print(f"[red]Error:[/] {escape(e.message)}")
        err_console.print(USAGE, markup=False, highlight=False)
        raise SystemExit(1) from e

    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path, env=os.environ)
        repo = GitRepository(config.project_root, strict_tag_lookup=config.strict_tag_lookup)
        context = ReleaseContext(
            config=config,
            vcs=repo,
            outputs=OutputChannel(config.output_file, console),
        )
        outcome = run_release(bump, description or None, context)
    except ReleaseCoordinatorError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    match outcome:
        case AlreadyReleased(version=version):
            console.print(f"[yellow]Version {version} is already released. Nothing to do.[/]")
        case Committed(version=version):
            console.print(f"[green]Released version {version}.[/]")
        case _:
            console.print(
                f"[yellow]Version bumped to {outcome.version} but there was nothing to commit.[/]"
            )
