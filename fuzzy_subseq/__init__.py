from __future__ import annotations

from fuzzy_subseq.search import (
    EMPTY_NEEDLE_SCORE,
    PREFIX_BONUS,
    fuzzy_indices,
    fuzzy_match,
)

__version__ = "0.1.0"

__all__ = [
    "EMPTY_NEEDLE_SCORE",
    "PREFIX_BONUS",
    "__version__",
    "fuzzy_indices",
    "fuzzy_match",
]
