"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from business logic.
"""

from collections.abc import Callable
import functools
from pathlib import Path
from typing import ParamSpec, TypeVar

from rich.console import Console
import typer

from mixtape.application.use_cases import ApplyChangesResult
from mixtape.config import get_logger

# Initialize consoles and logger
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def print_error(message: str) -> None:
    """Print a plain line to stderr, without Rich markup or wrapping."""
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    This decorator wraps a command function to:
    1. Let Typer's Exit and Abort propagate untouched
    2. Log errors using Loguru with full traceback at debug level
    3. Print ``Error: <message>`` on stderr and exit with code 1

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with integrated error handling
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except (typer.Exit, typer.Abort):
                raise

            except Exception as e:
                logger.opt(exception=e).debug(f"Error during {operation}")
                print_error(f"Error: {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def display_apply_summary(result: ApplyChangesResult, output_path: Path) -> None:
    """Print a one-line summary of an apply run."""
    console.print(
        f"[bold green]✓[/bold green] Applied [bold]{result.applied}[/bold] of "
        f"{result.requested} changes ([yellow]{result.skipped} skipped[/yellow]) "
        f"-> {output_path}",
        highlight=False,
        soft_wrap=True,
    )
