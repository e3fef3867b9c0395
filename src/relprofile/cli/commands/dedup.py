"""Dedup command - sorted neighborhood duplicate detection."""

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


def dedup(
    source: CsvFileArg,
    keys: Annotated[
        list[str],
        typer.Option(
            "--key",
            "-k",
            help="Sorting key attribute (repeatable)",
        ),
    ],
    window: Annotated[
        int | None,
        typer.Option("--window", min=2, help="Window size (default: RELPROFILE_DEDUP_WINDOW_SIZE)"),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option(
            "--threshold",
            min=0.0,
            max=1.0,
            help="Duplicate threshold (default: RELPROFILE_DEDUP_THRESHOLD)",
        ),
    ] = None,
    closure: Annotated[
        bool,
        typer.Option("--closure/--no-closure", help="Add transitively implied pairs"),
    ] = True,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Detect duplicate records in a CSV file.

    Examples:

        relprofile dedup people.csv --key name

        relprofile dedup people.csv -k name -k city --window 6 --json
    """
    from relprofile.dedup import SortedNeighborhood, suggest_record_comparator, transitive_closure

    setup_logging(verbose)
    settings = get_settings()
    relation = load_relation(source)

    unknown = [k for k in keys if k not in relation.attributes]
    if unknown:
        console.print(f"[red]Unknown sorting key(s): {', '.join(unknown)}[/red]")
        raise typer.Exit(1)
    sorting_keys = [relation.attributes.index(k) for k in keys]

    comparator = suggest_record_comparator(
        relation,
        threshold=threshold if threshold is not None else settings.dedup_threshold,
    )
    try:
        duplicates = SortedNeighborhood().detect_duplicates(
            relation,
            sorting_keys,
            window if window is not None else settings.dedup_window_size,
            comparator,
        )
    except ProfilingError as e:
        console.print(f"[red]Duplicate detection failed: {e}[/red]")
        raise typer.Exit(1) from e

    if closure:
        duplicates = transitive_closure(duplicates)
    ordered = sorted(duplicates, key=lambda d: d.pair)

    if json_output:
        output = {
            "relation": relation.name,
            "duplicates": [
                {
                    "index1": d.index1,
                    "index2": d.index2,
                    "similarity": round(d.similarity, 4),
                    "inferred": d.inferred,
                }
                for d in ordered
            ],
        }
        console.print_json(data=output)
        return

    console.print(f"\n[bold]Duplicates[/bold] - {relation.name}\n")
    if not ordered:
        console.print("[yellow]No duplicates found[/yellow]")
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Row 1", justify="right")
    table.add_column("Row 2", justify="right")
    table.add_column("Similarity", justify="right")
    table.add_column("Inferred")
    for d in ordered:
        table.add_row(
            str(d.index1),
            str(d.index2),
            f"{d.similarity:.3f}",
            "Yes" if d.inferred else "No",
        )
    console.print(table)
