"""
Command line interface for the SSM document repository scaffolder.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import get_settings, resolve_log_level
from .project import ScaffoldError, ScaffoldReport, generate_repository, plan_repository, resolve_repository_name

console = Console()
app = typer.Typer(help="Create a Terraform repository for a shell + PowerShell SSM document.")
logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level_str = resolve_log_level(level_name, get_settings())
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, escape(value))
    console.print(table)


def _print_plan(name: str) -> None:
    table = Table(title=f"Planned files for {escape(name)}")
    table.add_column("Path", overflow="fold")
    table.add_column("Bytes", justify="right")
    for target, content in plan_repository(name):
        table.add_row(escape(str(target)), str(len(content.encode("utf-8"))))
    console.print(table)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold green]ssm-scaffold[/] {__version__}")
        raise typer.Exit()


@app.command()
def create(
    repository_name: Optional[str] = typer.Argument(
        None,
        help="Directory name for the new repository (default: my-ssm-doc-repo).",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the files that would be written without touching the filesystem.",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show ssm-scaffold version and exit.",
        is_flag=True,
        is_eager=True,
        callback=_version_callback,
    ),
) -> None:
    """
    Write the Terraform config, SSM document module and placeholder scripts to ./REPOSITORY_NAME.
    """
    _configure_logging(log_level)
    name = resolve_repository_name(repository_name)

    if dry_run:
        _print_plan(name)
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
        return

    try:
        report = generate_repository(name)
    except ScaffoldError as exc:
        logger.debug("Scaffold aborted", exc_info=True)
        console.print(f"[bold red]Scaffold failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    label = escape(name)
    console.print(f"[bold green]Terraform repo created in ./{label}[/]")
    console.print(
        f"You can edit scripts under ./{label}/scripts/, then run "
        f"'terraform init && terraform apply' within ./{label}."
    )
    console.print("[yellow]Reminder:[/] Don't forget to 'git init' to version control your new project!")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
