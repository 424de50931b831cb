import pytest

from fuzzy_subseq import EMPTY_NEEDLE_SCORE, PREFIX_BONUS, fuzzy_indices, fuzzy_match
from fuzzy_subseq.search import lowering_map


def test_ascii_basic_indices() -> None:
    # 'h' at 0, 'l' at 2 -> window 1, start-of-string bonus applies
    assert fuzzy_match("hello", "hl") == ([0, 2], -99)


def test_order_is_respected() -> None:
    assert fuzzy_match("hello", "lh") is None


def test_contiguous_match_beats_spread_match() -> None:
    contiguous = fuzzy_match("abc", "abc")
    spread = fuzzy_match("a-b-c", "abc")

    assert contiguous == ([0, 1, 2], -100)
    assert spread == ([0, 2, 4], -98)
    assert contiguous[1] < spread[1]


def test_start_of_string_bonus() -> None:
    prefix = fuzzy_match("file_name", "file")
    inner = fuzzy_match("my_file_name", "file")

    assert prefix == ([0, 1, 2, 3], -100)
    assert inner == ([3, 4, 5, 6], 0)
    assert inner[1] - prefix[1] == PREFIX_BONUS


def test_case_insensitive_matching() -> None:
    assert fuzzy_match("FooBar", "foO") == ([0, 1, 2], -100)
    assert fuzzy_match("hello", "HL") == fuzzy_match("HELLO", "hl")


def test_empty_needle_matches_with_sentinel_score() -> None:
    assert fuzzy_match("anything", "") == ([], EMPTY_NEEDLE_SCORE)
    assert fuzzy_match("", "") == ([], EMPTY_NEEDLE_SCORE)


def test_empty_haystack_does_not_match() -> None:
    assert fuzzy_match("", "a") is None


def test_partial_progress_is_still_no_match() -> None:
    assert fuzzy_match("abc", "abd") is None


def test_german_sharp_s_is_not_folded() -> None:
    assert fuzzy_match("straße", "strasse") is None
    assert fuzzy_match("STRASSE", "straße") is None


def test_dotted_capital_i_highlights_original_characters() -> None:
    # 'İ' lowers to 'i' + U+0307, so 's' sits at lowered position 2.
    assert fuzzy_match("İstanbul", "is") == ([0, 1], -99)


def test_expanded_character_is_deduplicated() -> None:
    assert fuzzy_match("İ", "i\u0307") == ([0], -100)


def test_match_inside_expansion_starts_at_expanded_character() -> None:
    indices, score = fuzzy_match("İ", "\u0307")

    assert indices == [0]
    assert score == 1 - PREFIX_BONUS


def test_greedy_scan_takes_first_occurrence() -> None:
    # A tighter alignment exists at the end, but the first 'a' is taken.
    assert fuzzy_match("axxbab", "ab") == ([0, 3], -98)


def test_needle_whitespace_is_matched_literally() -> None:
    assert fuzzy_match("foo bar", "o b") == ([1, 3, 4], 1)
    assert fuzzy_match("foobar", "o b") is None


@pytest.mark.parametrize(
    ("haystack", "needle"),
    [
        ("hello world", "hwd"),
        ("Straße Nummer", "SN"),
        ("İİİ", "i"),
        ("aaaa", "aa"),
    ],
)
def test_indices_are_ascending_unique_and_in_range(haystack: str, needle: str) -> None:
    result = fuzzy_match(haystack, needle)
    assert result is not None
    indices, _score = result

    assert indices == sorted(set(indices))
    assert all(0 <= index < len(haystack) for index in indices)
    assert len(indices) <= len(needle)


def test_fuzzy_indices_drops_score() -> None:
    assert fuzzy_indices("hello", "hl") == [0, 2]
    assert fuzzy_indices("hello", "lh") is None
    assert fuzzy_indices("hello", "") == []


def test_lowering_map_tracks_original_positions() -> None:
    lowered, original = lowering_map("İaB")

    assert lowered == ["i", "\u0307", "a", "b"]
    assert original == [0, 0, 1, 2]


def test_lowering_map_of_empty_haystack() -> None:
    assert lowering_map("") == ([], [])
