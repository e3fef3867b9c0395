"""Shared CLI utilities and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console

from relprofile.core.config import get_settings
from relprofile.core.logging import configure_logging
from relprofile.core.models import Result
from relprofile.sources.csv import CSVLoader
from relprofile.sources.relation import Relation

# Load .env file from current directory (RELPROFILE_* settings)
load_dotenv()

T = TypeVar("T")

# Shared console instance
console = Console()

# Common type aliases for typer options
CsvFileArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a CSV file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=RELPROFILE_LOG_LEVEL (default WARNING), 1=INFO, 2+=DEBUG
        log_format: "console" for development, "json" for scripting
            (default: RELPROFILE_LOG_FORMAT)
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level
    if log_format is None:
        log_format = settings.log_format

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def unwrap_or_exit(result: Result[T]) -> T:
    """Return the result's value, or print its error and exit with status 1."""
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    for warning in result.warnings:
        console.print(f"[yellow]{warning}[/yellow]")
    return result.unwrap()


def load_relation(path: Path) -> Relation:
    """Load one CSV file or exit with an error message."""
    return unwrap_or_exit(CSVLoader().load(path))
