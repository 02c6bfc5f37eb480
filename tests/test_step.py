"""Tests for the step model: freezing, tag validation, serialisation, builders."""

import math

import pytest

from algorithms.step import (
    DPStep,
    DPStepBuilder,
    GraphStepBuilder,
    SearchStepBuilder,
    SortStep,
    SortStepBuilder,
    Step,
    StringStepBuilder,
    finite_or_none,
    freeze,
)
from graph import Graph


# --- freeze / finite_or_none ---

class TestFreeze:
    def test_lists_become_tuples(self):
        assert freeze([1, [2, 3]]) == (1, (2, 3))

    def test_sets_become_sorted_tuples(self):
        assert freeze({3, 1, 2}) == (1, 2, 3)

    def test_range_becomes_tuple(self):
        assert freeze(range(2, 5)) == (2, 3, 4)

    def test_dict_is_copied(self):
        original = {"a": [1, 2]}
        frozen = freeze(original)
        original["a"].append(3)
        assert frozen == {"a": (1, 2)}

    def test_infinity_becomes_none(self):
        assert finite_or_none(math.inf) is None
        assert finite_or_none(float("nan")) is None
        assert finite_or_none(4.5) == 4.5


# --- Step dataclasses ---

class TestStepTypes:
    def test_unknown_tag_raises(self):
        with pytest.raises(ValueError, match="does not allow step type"):
            SortStep(type="relax")

    def test_known_tag_accepted(self):
        assert SortStep(type="swap").type == "swap"

    def test_steps_are_frozen(self):
        step = SortStep(type="compare")
        with pytest.raises(AttributeError):
            step.type = "swap"

    def test_to_dict_is_json_safe(self):
        step = DPStep(type="fill", table=((0, None), (1, 2)), current_cell=(1, 1))
        data = step.to_dict()
        assert data["table"] == [[0, None], [1, 2]]
        assert data["current_cell"] == [1, 1]
        assert data["type"] == "fill"

    def test_base_step_result_infinity_serialises_as_none(self):
        assert Step(result={"A": math.inf}).to_dict()["result"] == {"A": None}


# --- Builders ---

class TestSortStepBuilder:
    def test_numbers_steps_consecutively(self):
        sb = SortStepBuilder([3, 1])
        first = sb.build("compare", "c", comparing=(0, 1))
        second = sb.build("swap", "s", swapping=(0, 1))
        assert (first.step_number, second.step_number) == (0, 1)

    def test_snapshot_is_isolated_from_later_mutation(self):
        arr = [3, 1]
        sb = SortStepBuilder(arr)
        step = sb.build("compare", "c")
        arr[0], arr[1] = arr[1], arr[0]
        assert step.array == (3, 1)

    def test_complete_is_final_with_result(self):
        arr = [1, 2]
        sb = SortStepBuilder(arr)
        sb.mark_all_sorted()
        step = sb.complete("done", result=list(arr))
        assert step.is_final and step.type == "complete"
        assert step.result == [1, 2]
        assert step.sorted_indices == (0, 1)

    def test_result_is_deep_copied(self):
        result = [1, 2]
        step = SortStepBuilder([]).complete("done", result=result)
        result.append(3)
        assert step.result == [1, 2]


class TestSearchStepBuilder:
    def test_found_emits_found_then_complete(self):
        found, complete = SearchStepBuilder([1, 2, 3], 2).found(1)
        assert found.type == "found" and found.found_index == 1
        assert complete.is_final
        assert complete.result == {"found": True, "index": 1}

    def test_not_found_result(self):
        steps = SearchStepBuilder([1], 5).not_found()
        assert [s.type for s in steps] == ["not-found", "complete"]
        assert steps[-1].result == {"found": False, "index": -1}


class TestGraphStepBuilder:
    def test_processing_and_highlight_touch_only_snapshot(self):
        g = Graph.from_lists([{"id": "A"}, {"id": "B"}], [{"source": "A", "target": "B"}])
        sb = GraphStepBuilder(g)
        edge = g.edges["e0"]
        step = sb.build("visit", "v", processing=["A"], highlight=[edge])

        snap_a = next(n for n in step.nodes if n.id == "A")
        assert snap_a.processing is True
        assert step.edges[0].highlighted is True
        assert g.nodes["A"].processing is False
        assert edge.highlighted is False


class TestDPStepBuilder:
    def test_one_dimensional_table_is_a_single_row(self):
        step = DPStepBuilder([0, 1, math.inf]).build("fill", "f")
        assert step.table == ((0, 1, None),)

    def test_two_dimensional_table(self):
        step = DPStepBuilder([[0, 1], [2, 3]]).build("fill", "f")
        assert step.table == ((0, 1), (2, 3))


class TestStringStepBuilder:
    def test_matches_snapshot_sorted(self):
        sb = StringStepBuilder("abab", "ab")
        sb.matches.extend([2, 0])
        step = sb.build("found", "f")
        assert step.matches == (0, 2)
        assert step.text == "abab" and step.pattern == "ab"
