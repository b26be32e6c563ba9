"""Typer application and entry point."""

import logging
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperCommand

from release_coordinator.cli.commands.release import USAGE, run_release_command


class ReleaseCommand(TyperCommand):
    """Reports command line parsing errors with the usage line and exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            err_console = Console(stderr=True)
            err_console.print(f"[red]Error:[/] {escape(e.format_message())}")
            err_console.print(USAGE, markup=False, highlight=False)
            ctx.exit(1)


app = typer.Typer(
    name="release-coordinator",
    help="Bump the version, collect changelog fragments, then commit, tag and push a release.",
    add_completion=False,
)


def _configure_logging(verbose: bool, console: Console) -> None:
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("release_coordinator")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command(cls=ReleaseCommand)
def release(
    bump_type: Annotated[
        str | None,
        typer.Option("--bump-type", help="Version component to bump: major, minor or patch."),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", help="Text appended to the release commit and tag messages."),
    ] = None,
    path: Annotated[
        str | None,
        typer.Option("--path", help="Project root (defaults to the current directory)."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
) -> None:
    """Release a new version of the project."""
    console = Console()
    err_console = Console(stderr=True)
    _configure_logging(verbose, err_console)

    run_release_command(
        bump_type=bump_type,
        description=description,
        path=path,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    """Console script entry point."""
    app()
