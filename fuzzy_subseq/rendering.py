from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from fuzzy_subseq.models import FilterRow
from fuzzy_subseq.search import EMPTY_NEEDLE_SCORE


def highlight_matches(
    text: str, indices: Iterable[int], *, style: str = "bold red"
) -> Text:
    highlighted = Text(text)
    for index in indices:
        if 0 <= index < len(text):
            highlighted.stylize(style, index, index + 1)
    return highlighted


def format_score(score: int) -> str:
    if score == EMPTY_NEEDLE_SCORE:
        return "-"
    return str(score)


def render_row(row: FilterRow, *, show_score: bool = False) -> Text:
    line = highlight_matches(row.candidate, row.indices)
    if show_score:
        line = Text.assemble((f"{format_score(row.score):>6} ", "dim"), line)
    return line
