"""Mixtape CLI - main application entry point.

Reads a catalog and a change list, applies the changes and writes the
resulting catalog::

    mixtape -m mixtape.json -c changes.json -o output.json
"""

from importlib.metadata import version
from pathlib import Path
from typing import Annotated

from rich.console import Console
import typer

from mixtape.application.use_cases import run_apply_changes
from mixtape.config import get_logger, settings, setup_loguru_logger
from mixtape.infrastructure.cli.ui import (
    command_error_handler,
    display_apply_summary,
    print_error,
)
from mixtape.infrastructure.json_files import (
    read_catalog,
    read_change_list,
    write_catalog,
)

VERSION = version("mixtape")

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎵 Mixtape v{VERSION} - apply playlist changes to a mixtape catalog",
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(
            f"[bold bright_blue]🎵 Mixtape[/bold bright_blue] [dim]v{VERSION}[/dim]"
        )
        raise typer.Exit()


@app.command()
@command_error_handler
def apply_changes(
    ctx: typer.Context,
    mixtape_file: Annotated[
        Path | None,
        typer.Option("--mixtape", "-m", help="Filepath to the JSON mixtape file"),
    ] = None,
    changes_file: Annotated[
        Path | None,
        typer.Option("--changes", "-c", help="Filepath to the JSON changes file"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Filepath to write the changed mixtape JSON file (default ./output.json)",
        ),
    ] = None,
    verify_index: Annotated[
        bool,
        typer.Option(
            "--verify-index", help="Check lookup index coherence after applying"
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = False,
) -> None:
    """Apply playlist changes to a mixtape and write the result."""
    setup_loguru_logger(verbose)

    if mixtape_file is None or changes_file is None:
        print_error("Error parsing flags: missing required flags -m and -c")
        print_error(ctx.get_usage())
        raise typer.Exit(code=1)

    output_path = output_file or settings.engine.default_output

    catalog = read_catalog(mixtape_file)
    changes = read_change_list(changes_file)

    result = run_apply_changes(
        catalog, changes, verify_index=True if verify_index else None
    )

    write_catalog(catalog, output_path)
    display_apply_summary(result, output_path)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
