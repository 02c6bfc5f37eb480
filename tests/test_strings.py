"""Tests for the string-matching generators."""

import random

import pytest

from algorithms.strings import (
    boyer_moore,
    kmp_search,
    manacher,
    multi_pattern_search,
    naive_search,
    rabin_karp,
    z_search,
)
from algorithms.strings.boyer_moore import LastOccurrence
from algorithms.strings.z_algorithm import _sentinel

SINGLE_PATTERN = [boyer_moore, kmp_search, naive_search, rabin_karp, z_search]


def _matches(search, text, pattern):
    final = list(search(text, pattern))[-1]
    assert final.is_final and final.type == "complete"
    return final.result


@pytest.mark.parametrize("search", SINGLE_PATTERN, ids=lambda f: f.__name__)
class TestEverySingleSearch:
    def test_textbook_instance(self, search):
        assert _matches(search, "ABABDABACDABABCABAB", "ABABCABAB") == [10]

    def test_overlapping_matches(self, search):
        assert _matches(search, "aaaa", "aa") == [0, 1, 2]

    def test_no_match(self, search):
        assert _matches(search, "abcdef", "xyz") == []

    def test_pattern_longer_than_text(self, search):
        assert _matches(search, "ab", "abc") == []

    def test_whole_text_match(self, search):
        assert _matches(search, "abc", "abc") == [0]

    def test_final_matches_field_equals_result(self, search):
        final = list(search("abcabc", "bc"))[-1]
        assert list(final.matches) == final.result == [1, 4]

    def test_non_ascii_text(self, search):
        assert _matches(search, "héllo wörld hé", "hé") == [0, 12]


class TestSearchesAgree:
    def test_random_texts(self):
        rng = random.Random(4)
        for _ in range(30):
            text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 25)))
            pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
            expected = [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]
            for search in SINGLE_PATTERN:
                assert _matches(search, text, pattern) == expected, search.__name__


class TestKMP:
    def test_lps_table(self):
        final = list(kmp_search("ABABDABACDABABCABAB", "ABABCABAB"))[-1]
        assert final.table == (0, 0, 1, 2, 0, 1, 2, 3, 4)

    def test_lps_built_before_search(self):
        types = [s.type for s in kmp_search("abcab", "ab")]
        assert types.index("lps-complete") < types.index("found")

    def test_empty_pattern(self):
        assert _matches(kmp_search, "abc", "") == []


class TestRabinKarp:
    def test_hash_steps(self):
        types = {s.type for s in rabin_karp("abcabc", "abc")}
        assert {"hash-init", "compare-hash", "roll-hash"} <= types

    def test_window_hash_matches_pattern_hash_on_hit(self):
        hit = next(s for s in rabin_karp("xxabc", "abc") if s.type == "found")
        assert hit.window_hash == hit.pattern_hash


class TestBoyerMoore:
    def test_last_occurrence_table(self):
        last = LastOccurrence("abcab")
        assert last["a"] == 3 and last["b"] == 4 and last["c"] == 2
        assert last["z"] == -1

    def test_last_occurrence_beyond_latin1(self):
        assert LastOccurrence("aλb")["λ"] == 1


class TestZAlgorithm:
    def test_sentinel_avoids_input_characters(self):
        sentinel = _sentinel("ab\x00", "\x01")
        assert sentinel not in "ab\x00\x01"

    def test_text_containing_low_code_points(self):
        assert _matches(z_search, "\x00a\x00a", "\x00a") == [0, 2]


class TestManacher:
    @pytest.mark.parametrize("text, expected", [
        ("forgeeksskeegfor", "geeksskeeg"),
        ("babad", "bab"),
        ("cbbd", "bb"),
        ("a", "a"),
        ("", ""),
    ])
    def test_longest_palindrome(self, text, expected):
        assert list(manacher(text))[-1].result == expected

    def test_match_position(self):
        final = list(manacher("forgeeksskeegfor"))[-1]
        assert final.matches == (3,)


class TestMultiPattern:
    def test_textbook_instance(self):
        final = list(multi_pattern_search("ushers", ["he", "she", "his", "hers"]))[-1]
        assert final.result == {
            "positions": [1, 2],
            "patterns": {"he": [2], "she": [1], "his": [], "hers": [2]},
        }

    def test_one_pattern_start_step_per_pattern(self):
        steps = list(multi_pattern_search("abab", ["a", "b"]))
        assert [s.pattern for s in steps if s.type == "pattern-start"] == ["a", "b"]
