"""
Command line interface for go-init.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import get_settings
from .errors import ScaffoldError
from .scaffold import ScaffoldReport, scaffold_project

console = Console()
app = typer.Typer(help="Create a new Go project skeleton with lifecycle scripts.", add_completion=False)
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
USAGE = "usage: go-init <new project dir> <org>"


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _display(value: str) -> str:
    """Escape markup and replace undecodable argv bytes so the text can be printed."""
    return escape(value.encode("utf-8", "surrogateescape").decode("utf-8", "replace"))


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, _display(value))
    console.print(table)


@app.command(context_settings={"allow_extra_args": True})
def init(
    ctx: typer.Context,
    directory: Optional[str] = typer.Argument(
        None,
        help="Name of the new project directory (also the binary name).",
        show_default=False,
    ),
    org: Optional[str] = typer.Argument(
        None,
        help="GitHub organization that will host the project.",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show go-init version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Create DIRECTORY with a Go module for github.com/ORG/DIRECTORY, license, stubs and scripts.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]go-init[/] {__version__}")
        raise typer.Exit()

    if not directory or not org:
        console.print(USAGE, markup=False)
        raise typer.Exit(code=1)

    if ctx.args:
        logger.debug("Ignoring extra arguments %s", ctx.args)

    settings = get_settings()
    logger.info("Creating project %s for organization %s", directory, org)
    try:
        report = scaffold_project(directory, org, git_executable=settings.git_executable)
    except ScaffoldError as exc:
        console.print(
            f"[bold red]unable to create project for dir '{_display(directory)}' with error '{_display(str(exc))}'[/]",
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    console.print(f"[bold green]project {_display(directory)} created[/]", soft_wrap=True)
    console.print(
        f"github repo is expected to be http://github.com/{_display(org)}/{_display(directory)}",
        soft_wrap=True,
        highlight=False,
    )


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
