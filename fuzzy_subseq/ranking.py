from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from fuzzy_subseq.models import FilterRow
from fuzzy_subseq.search import EMPTY_NEEDLE_SCORE, fuzzy_match


def filter_candidates(query: str, candidates: Iterable[str]) -> list[FilterRow]:
    """Rank the candidates matching ``query``, best first."""
    if not query:
        return [
            FilterRow(candidate=candidate, score=EMPTY_NEEDLE_SCORE)
            for candidate in candidates
        ]

    rows: list[FilterRow] = []
    for candidate in candidates:
        result = fuzzy_match(candidate, query)
        if result is None:
            continue
        indices, score = result
        rows.append(FilterRow(candidate=candidate, indices=tuple(indices), score=score))

    rows.sort(key=lambda row: (row.score, row.candidate))
    return rows


def read_candidates(stream: TextIO) -> list[str]:
    seen: set[str] = set()
    candidates: list[str] = []
    for line in stream:
        candidate = line.rstrip("\r\n")
        if not candidate.strip() or candidate in seen:
            continue
        seen.add(candidate)
        candidates.append(candidate)
    return candidates


def load_candidates(path: Path) -> list[str]:
    with path.open(encoding="utf-8") as handle:
        return read_candidates(handle)
