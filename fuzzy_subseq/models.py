from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ViewMode = Literal["browse", "filter"]
MatchResult = tuple[list[int], int]


@dataclass(frozen=True)
class FilterRow:
    candidate: str
    score: int
    indices: tuple[int, ...] = ()
