"""Match command - schema matching between two CSV files."""

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


def match(
    source: CsvFileArg,
    target: CsvFileArg,
    min_similarity: Annotated[
        float,
        typer.Option(
            "--min-similarity",
            min=0.0,
            max=1.0,
            help="Drop assigned pairs below this similarity",
        ),
    ] = 0.0,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Match the attributes of two CSV files by their values.

    Examples:

        relprofile match people_a.csv people_b.csv

        relprofile match a.csv b.csv --min-similarity 0.2 --json
    """
    from relprofile.matching import FirstLineSchemaMatcher, SecondLineSchemaMatcher
    from relprofile.similarity import Jaccard, Tokenizer

    setup_logging(verbose)
    settings = get_settings()
    source_relation = load_relation(source)
    target_relation = load_relation(target)

    measure = Jaccard(
        Tokenizer(size=settings.tokenizer_ngram_size, padding=settings.tokenizer_padding),
        bag_semantics=settings.jaccard_bag_semantics,
    )
    similarities = FirstLineSchemaMatcher(measure).match(source_relation, target_relation)
    correspondences = SecondLineSchemaMatcher(min_similarity).match(similarities)
    pairs = correspondences.correspondences()

    if json_output:
        output = {
            "source": source_relation.name,
            "target": target_relation.name,
            "similarity_matrix": similarities.matrix.round(4).tolist(),
            "correspondences": [
                {
                    "source_attribute": c.source_name,
                    "target_attribute": c.target_name,
                    "similarity": round(c.similarity, 4),
                }
                for c in pairs
            ],
        }
        console.print_json(data=output)
        return

    console.print(
        f"\n[bold]Schema Matching[/bold] - {source_relation.name} → {target_relation.name}\n"
    )
    if not pairs:
        console.print("[yellow]No correspondences found[/yellow]")
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column(source_relation.name)
    table.add_column(target_relation.name)
    table.add_column("Similarity", justify="right")
    for c in pairs:
        table.add_row(c.source_name, c.target_name, f"{c.similarity:.3f}")
    console.print(table)
