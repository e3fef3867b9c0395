"""UCC command - discover minimal unique column combinations."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table as RichTable

from relprofile.cli.common import (
    CsvFileArg,
    JsonFlag,
    VerboseOption,
    console,
    load_relation,
    setup_logging,
)
from relprofile.core.config import get_settings
from relprofile.core.errors import ProfilingError
from relprofile.profiling.models import UCCProfileResult


def ucc(
    source: CsvFileArg,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-w",
            min=1,
            help="Threads per search level (default: RELPROFILE_UCC_MAX_WORKERS)",
        ),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Discover minimal unique column combinations of a CSV file.

    Examples:

        relprofile ucc customers.csv

        relprofile ucc orders.csv --workers 4 --json
    """
    from relprofile.profiling import profile_uccs

    setup_logging(verbose)
    relation = load_relation(source)
    max_workers = workers if workers is not None else get_settings().ucc_max_workers

    try:
        result = profile_uccs(relation, max_workers=max_workers)
    except ProfilingError as e:
        console.print(f"[red]UCC discovery failed: {e}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        console.print_json(result.model_dump_json())
    else:
        _print_rich(result)


def _print_rich(result: UCCProfileResult) -> None:
    console.print(
        f"\n[bold]Unique Column Combinations[/bold] - {result.relation} "
        f"({result.num_rows:,} rows, {result.num_attributes} attributes)\n"
    )

    if not result.uccs:
        console.print("[yellow]No unique column combinations found[/yellow]")
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Attributes")
    table.add_column("Indices")
    for report in result.uccs:
        table.add_row(
            str(report.size),
            ", ".join(report.attribute_names),
            ", ".join(str(i) for i in report.attribute_indices),
        )
    console.print(table)

    levels = RichTable(show_header=True, header_style="bold", title="Search Levels")
    levels.add_column("Level", justify="right")
    levels.add_column("Frontier", justify="right")
    levels.add_column("Generated", justify="right")
    levels.add_column("Pruned", justify="right")
    levels.add_column("Tested", justify="right")
    levels.add_column("UCCs", justify="right")
    for level in result.levels:
        levels.add_row(
            str(level.level),
            str(level.frontier_size),
            str(level.candidates_generated),
            str(level.candidates_pruned),
            str(level.candidates_tested),
            str(level.uccs_found),
        )
    console.print(levels)
    console.print(f"\nCompleted in {result.duration_seconds:.3f}s")
