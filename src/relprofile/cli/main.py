"""Main CLI application entry point."""

from __future__ import annotations

import typer

from relprofile.cli.commands import dedup, ind, match, ucc

app = typer.Typer(
    name="relprofile",
    help="relprofile - discover unique column combinations and inclusion dependencies.",
    no_args_is_help=True,
)

# Register commands
app.command()(ucc.ucc)
app.command()(ind.ind)
app.command()(match.match)
app.command()(dedup.dedup)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
