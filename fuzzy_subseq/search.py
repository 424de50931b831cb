from __future__ import annotations

import sys

from fuzzy_subseq.models import MatchResult

# Returned for an empty needle. Numerically the largest score, so callers must
# special-case it instead of sorting it with the "smaller is better" scores.
EMPTY_NEEDLE_SCORE = sys.maxsize
PREFIX_BONUS = 100


def lowering_map(haystack: str) -> tuple[list[str], list[int]]:
    """Lowercase ``haystack`` one character at a time.

    Lowercasing is not length-preserving (``"İ"`` becomes ``"i"`` plus a
    combining dot), so every lowered character is paired with the index of the
    original character it came from. The index list is non-decreasing.
    """
    lowered_chars: list[str] = []
    original_indices: list[int] = []
    for original_index, char in enumerate(haystack):
        for lowered in char.lower():
            lowered_chars.append(lowered)
            original_indices.append(original_index)
    return lowered_chars, original_indices


def fuzzy_match(haystack: str, needle: str) -> MatchResult | None:
    """Match ``needle`` as a case-insensitive subsequence of ``haystack``.

    Returns the sorted, unique character indices of ``haystack`` used by the
    match and a score where smaller is better, or ``None`` when the needle's
    characters do not appear in order. Each needle character takes the first
    available haystack character; no better alignment is searched for.

    An empty needle matches anything with no indices and ``EMPTY_NEEDLE_SCORE``.
    """
    if not needle:
        return [], EMPTY_NEEDLE_SCORE

    lowered_chars, original_indices = lowering_map(haystack)
    lowered_needle = needle.lower()

    matched: list[int] = []
    last_position = 0
    cursor = 0
    for char in lowered_needle:
        while cursor < len(lowered_chars) and lowered_chars[cursor] != char:
            cursor += 1
        if cursor == len(lowered_chars):
            return None
        matched.append(original_indices[cursor])
        last_position = cursor
        cursor += 1

    # The first original character may have expanded to several lowered ones;
    # the match starts at the earliest of them.
    first_position = original_indices.index(matched[0])
    window = (last_position - first_position + 1) - len(lowered_needle)
    score = max(window, 0)
    if first_position == 0:
        score -= PREFIX_BONUS

    return sorted(set(matched)), score


def fuzzy_indices(haystack: str, needle: str) -> list[int] | None:
    result = fuzzy_match(haystack, needle)
    if result is None:
        return None
    indices, _score = result
    return indices
