"""Tests for the searching generators."""

import random

import pytest

from algorithms.searching import (
    binary_search,
    exponential_search,
    fibonacci_search,
    interpolation_search,
    jump_search,
    linear_search,
    ternary_search,
)
from algorithms.searching.exponential_search import PSEUDOCODE as EXPONENTIAL_PSEUDOCODE

ALL_SEARCHES = [
    binary_search, exponential_search, fibonacci_search, interpolation_search,
    jump_search, linear_search, ternary_search,
]

ARRAY = [1, 3, 5, 7, 9, 11]


@pytest.mark.parametrize("search", ALL_SEARCHES, ids=lambda f: f.__name__)
class TestEverySearch:
    @pytest.mark.parametrize("index", range(len(ARRAY)))
    def test_finds_every_present_value(self, search, index):
        final = list(search(ARRAY, ARRAY[index]))[-1]
        assert final.is_final and final.type == "complete"
        assert final.result == {"found": True, "index": index}

    @pytest.mark.parametrize("target", [0, 4, 12])
    def test_absent_value(self, search, target):
        steps = list(search(ARRAY, target))
        assert steps[-2].type == "not-found"
        assert steps[-1].result == {"found": False, "index": -1}

    def test_empty_array(self, search):
        steps = list(search([], 3))
        assert steps[-1].result == {"found": False, "index": -1}

    def test_found_step_precedes_complete(self, search):
        steps = list(search(ARRAY, 9))
        assert steps[-2].type == "found"
        assert steps[-2].found_index == 4

    def test_step_numbers_are_contiguous(self, search):
        steps = list(search(ARRAY, 11))
        assert [s.step_number for s in steps] == list(range(len(steps)))

    def test_single_element(self, search):
        assert list(search([5], 5))[-1].result == {"found": True, "index": 0}


class TestBinarySearch:
    def test_textbook_run(self):
        steps = list(binary_search([1, 3, 5, 7, 9, 11], 7))
        found = next(s for s in steps if s.type == "found")
        assert found.found_index == 3

    def test_mid_steps_carry_bounds(self):
        first_mid = next(s for s in binary_search(ARRAY, 11) if s.type == "calculate-mid")
        assert first_mid.bounds == (0, 5)
        assert first_mid.current_index == 2


class TestInterpolationSearch:
    def test_equal_values_do_not_divide_by_zero(self):
        assert list(interpolation_search([4, 4, 4, 4], 4))[-1].result["found"] is True

    def test_equal_values_absent_target(self):
        assert list(interpolation_search([4, 4, 4], 5))[-1].result["found"] is False


class TestJumpSearch:
    def test_jump_size_is_root_n(self):
        start = list(jump_search(list(range(16)), 10))[0]
        assert start.jump_size == 4


class TestExponentialSearch:
    def test_uses_bounded_binary_search(self):
        types = [s.type for s in exponential_search(list(range(0, 40, 2)), 30)]
        assert "expand" in types
        assert "range-found" in types
        assert "binary-compare" in types

    @pytest.mark.parametrize("target", [0, 3, 6, 31, 38, 99])
    def test_lines_stay_inside_its_pseudocode(self, target):
        steps = list(exponential_search(list(range(0, 40, 2)), target))
        assert all(0 <= s.pseudocode_line < len(EXPONENTIAL_PSEUDOCODE) for s in steps)

    def test_sub_search_points_at_its_own_rows(self):
        steps = list(exponential_search([1, 3, 5, 7, 9, 11, 13, 15], 4))
        lines = {s.type: s.pseudocode_line for s in steps}
        assert lines["calculate-mid"] == 7
        assert lines["move-left"] == 10
        assert lines["not-found"] == 11
        assert lines["complete"] == 11


class TestSearchesAgree:
    def test_random_sorted_arrays(self):
        rng = random.Random(11)
        for _ in range(25):
            array = sorted(rng.sample(range(200), rng.randint(1, 30)))
            target = rng.choice(array + [rng.randint(0, 199)])
            expected = array.index(target) if target in array else -1
            for search in ALL_SEARCHES:
                result = list(search(array, target))[-1].result
                assert result["index"] == expected, search.__name__

    def test_duplicates_land_on_a_matching_value(self):
        array = [1, 2, 2, 2, 3]
        for search in ALL_SEARCHES:
            result = list(search(array, 2))[-1].result
            assert result["found"] and array[result["index"]] == 2
