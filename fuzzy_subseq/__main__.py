from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from fuzzy_subseq import __version__
from fuzzy_subseq.ranking import filter_candidates, load_candidates, read_candidates
from fuzzy_subseq.rendering import render_row
from fuzzy_subseq.tui import FuzzyFilterTui

__all__ = [
    "FuzzyFilterTui",
    "cli",
    "run",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-subseq {__version__}")
    raise typer.Exit()


cli = typer.Typer(
    add_completion=False,
    help="Filter lines by case-insensitive subsequence matching.",
)


@cli.command()
def run(
    path: Path = typer.Argument(
        Path("-"),
        help="File with one candidate per line. Use '-' to read from stdin.",
    ),
    query: str = typer.Option(
        "",
        "--query",
        "-q",
        help="Initial query.",
    ),
    print_only: bool = typer.Option(
        False,
        "--print",
        help="Print the ranked matches instead of opening the picker.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        help="Show the score of every match (smaller is better).",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Print at most this many matches.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    from_stdin = str(path) == "-"
    if from_stdin and not print_only:
        typer.echo("Reading candidates from stdin requires --print.", err=True)
        raise typer.Exit(code=1)

    try:
        candidates = (
            read_candidates(sys.stdin) if from_stdin else load_candidates(path)
        )
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Cannot read candidates from {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if print_only:
        rows = filter_candidates(query, candidates)
        if limit is not None:
            rows = rows[:limit]
        if not rows:
            raise typer.Exit(code=1)
        console = Console(highlight=False, soft_wrap=True)
        for row in rows:
            console.print(render_row(row, show_score=scores))
        return

    selected = FuzzyFilterTui(
        candidates=candidates,
        initial_query=query,
        show_scores=scores,
    ).run()
    if selected is None:
        raise typer.Exit(code=1)
    typer.echo(selected)


if __name__ == "__main__":
    cli()
