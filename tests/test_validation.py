"""Tests for request input validation and argument extraction."""

import pytest

from algorithms import get_algorithm
from engine import InvalidInputError, UnknownAlgorithmError
from engine.validation import extract_args, normalize_input, require_valid_input, validate_input


class TestSorting:
    def test_valid(self):
        assert validate_input("bubble-sort", {"array": [3, 1, 2]}) == []

    def test_bare_list_accepted(self):
        assert validate_input("bubble-sort", [3, 1, 2]) == []

    def test_missing_array(self):
        assert validate_input("bubble-sort", {}) == ["Input must have an array property"]

    def test_non_numeric(self):
        assert validate_input("quick-sort", {"array": [1, "x"]}) == ["Array must contain only numbers"]

    def test_booleans_are_not_numbers(self):
        assert validate_input("quick-sort", {"array": [True, 2]})

    def test_radix_needs_positive_integers(self):
        assert validate_input("radix-sort", {"array": [3, 0]}) == ["Radix sort requires positive integers"]

    def test_counting_needs_integers(self):
        assert validate_input("counting-sort", {"array": [1.5]}) == ["Counting sort requires integers"]


class TestSearching:
    def test_valid(self):
        assert validate_input("binary-search", {"array": [1, 2, 3], "target": 2}) == []

    def test_unsorted_rejected_for_binary(self):
        errors = validate_input("binary-search", {"array": [3, 1], "target": 1})
        assert errors == ["Array must be sorted for this search algorithm"]

    def test_unsorted_allowed_for_linear(self):
        assert validate_input("linear-search", {"array": [3, 1], "target": 1}) == []

    def test_missing_target(self):
        assert "Input must have a target value" in validate_input("jump-search", {"array": [1]})

    def test_bare_value_not_enough_for_two_params(self):
        assert validate_input("binary-search", [1, 2]) == ["Input must be an object"]


class TestGraph:
    def test_valid(self, sample_graph):
        assert validate_input("dijkstra", sample_graph) == []

    def test_missing_start(self, sample_graph):
        del sample_graph["startNode"]
        assert validate_input("bfs", sample_graph) == ["Input must have a startNode property"]

    def test_numeric_start_node_zero(self):
        graph = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1}], "startNode": 0}
        assert validate_input("bfs", graph) == []

    def test_empty_string_start_is_missing(self, sample_graph):
        sample_graph["startNode"] = ""
        assert validate_input("dfs", sample_graph) == ["Input must have a startNode property"]

    def test_start_not_needed_for_kruskal(self, sample_graph):
        del sample_graph["startNode"]
        assert validate_input("kruskal", sample_graph) == []

    def test_unknown_start(self, sample_graph):
        sample_graph["startNode"] = "Z"
        assert validate_input("prim", sample_graph) == ["Start node 'Z' is not in the graph"]

    def test_unknown_endpoint(self, sample_graph):
        sample_graph["edges"].append({"source": "A", "target": "Q"})
        assert validate_input("bfs", sample_graph) == ["Edge A-Q references unknown node 'Q'"]

    def test_duplicate_ids(self, sample_graph):
        sample_graph["nodes"].append({"id": "A"})
        assert validate_input("dfs", sample_graph) == ["Duplicate node id: A"]

    def test_dijkstra_rejects_negative_weights(self, negative_cycle_graph):
        errors = validate_input("dijkstra", negative_cycle_graph)
        assert "Dijkstra's algorithm requires non-negative edge weights" in errors

    def test_bellman_ford_accepts_negative_weights(self, negative_cycle_graph):
        assert validate_input("bellman-ford", negative_cycle_graph) == []

    def test_non_numeric_weight(self, sample_graph):
        sample_graph["edges"][0]["weight"] = "heavy"
        assert validate_input("bfs", sample_graph) == ["Edge A-B has a non-numeric weight"]

    def test_missing_lists(self):
        errors = validate_input("bfs", {"startNode": "A"})
        assert errors == ["Input must have a nodes array", "Input must have an edges array"]


class TestDP:
    def test_fibonacci_bare_integer(self):
        assert validate_input("fibonacci-dp", 10) == []

    def test_fibonacci_negative(self):
        assert validate_input("fibonacci-dp", {"n": -1}) == ["N must be >= 0"]

    def test_knapsack_length_mismatch(self):
        errors = validate_input("knapsack", {"weights": [1, 2], "values": [1], "capacity": 3})
        assert errors == ["Weights and values must have the same length"]

    def test_lcs_aliases(self):
        assert validate_input("lcs", {"string1": "AB", "string2": "B"}) == []

    def test_coin_change_needs_positive_coins(self):
        assert validate_input("coin-change", {"coins": [0, 1], "amount": 3}) == ["Coins must contain integers >= 1"]

    def test_matrix_chain_needs_two_dimensions(self):
        assert validate_input("matrix-chain", {"dimensions": [4]}) == ["Dimensions must describe at least one matrix"]

    def test_subset_sum(self):
        assert validate_input("subset-sum", {"array": [1, 2], "target": 3}) == []


class TestString:
    def test_valid(self):
        assert validate_input("kmp", {"text": "abc", "pattern": "b"}) == []

    def test_empty_pattern_rejected(self):
        assert validate_input("kmp", {"text": "abc", "pattern": ""}) == ["Input must have a pattern string"]

    def test_manacher_needs_only_text(self):
        assert validate_input("manacher", {"text": "abba"}) == []

    def test_patterns_list(self):
        assert validate_input("aho-corasick", {"text": "abc", "patterns": []}) == [
            "Input must have a non-empty patterns list of strings"
        ]


class TestErrors:
    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            validate_input("bogo-sort", {})
        assert str(exc_info.value) == "Algorithm bogo-sort not found"
        assert isinstance(exc_info.value, KeyError)

    def test_require_valid_input_raises_with_errors(self):
        with pytest.raises(InvalidInputError) as exc_info:
            require_valid_input("bubble-sort", {})
        assert exc_info.value.errors == ["Input must have an array property"]
        assert isinstance(exc_info.value, ValueError)


class TestExtractArgs:
    def test_param_order(self):
        info = get_algorithm("knapsack")
        args = extract_args(info, {"capacity": 5, "values": [1], "weights": [2]})
        assert args == [[2], [1], 5]

    def test_start_node_stringified(self):
        info = get_algorithm("bfs")
        args = extract_args(info, {"nodes": [{"id": 1}], "edges": [], "startNode": 1})
        assert args[-1] == "1"

    def test_aliases_resolved(self):
        info = get_algorithm("edit-distance")
        assert normalize_input(info, {"string1": "a", "string2": "b"})["str1"] == "a"
