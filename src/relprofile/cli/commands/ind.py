"""IND command - discover unary inclusion dependencies."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table as RichTable

from relprofile.cli.common import JsonFlag, VerboseOption, console, setup_logging, unwrap_or_exit
from relprofile.core.config import get_settings
from relprofile.core.errors import ProfilingError
from relprofile.sources.csv import CSVLoader


def ind(
    sources: Annotated[
        list[Path],
        typer.Argument(
            help="CSV files or directories containing CSV files",
            exists=True,
            file_okay=True,
            dir_okay=True,
            resolve_path=True,
        ),
    ],
    nary: Annotated[
        bool,
        typer.Option("--nary", help="Request n-ary INDs (not supported)"),
    ] = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Discover unary inclusion dependencies across CSV files.

    Examples:

        relprofile ind ./data

        relprofile ind customers.csv orders.csv --json
    """
    from relprofile.profiling import profile_inds

    setup_logging(verbose)
    relations = unwrap_or_exit(CSVLoader().load_paths(sources))

    try:
        result = profile_inds(
            relations,
            discover_nary=nary,
            strip_quotes=get_settings().ind_strip_quotes,
        )
    except ProfilingError as e:
        console.print(f"[red]IND discovery failed: {e}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        console.print_json(result.model_dump_json())
        return

    console.print(f"\n[bold]Inclusion Dependencies[/bold] - {', '.join(result.relations)}\n")
    if not result.inds:
        console.print("[yellow]No inclusion dependencies found[/yellow]")
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Dependent")
    table.add_column("")
    table.add_column("Referenced")
    for report in result.inds:
        table.add_row(
            f"{report.dependent_relation}.{report.dependent_attribute}",
            "⊆",
            f"{report.referenced_relation}.{report.referenced_attribute}",
        )
    console.print(table)
