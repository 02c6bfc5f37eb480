"""Tests for the algorithm registry and its lookup helpers."""

import random

import pytest

from algorithms import (
    CATEGORIES,
    DP,
    GRAPH,
    REGISTRY,
    SEARCHING,
    SORTING,
    STRING,
    algorithms_by_category,
    algorithms_by_tag,
    get_algorithm,
    list_algorithms,
    run_algorithm,
)
from engine.samples import generate_sample_input
from engine.validation import extract_args


class TestRegistryShape:
    def test_category_sizes(self):
        sizes = {c: len(algorithms_by_category(c)) for c in CATEGORIES}
        assert sizes == {SORTING: 12, SEARCHING: 7, GRAPH: 7, DP: 10, STRING: 7}

    def test_keys_match_entries(self):
        for key, info in REGISTRY.items():
            assert info.key == key

    def test_every_entry_has_pseudocode_and_params(self):
        for info in list_algorithms():
            assert info.pseudocode, info.key
            assert info.params, info.key
            assert info.category in CATEGORIES

    def test_to_dict(self):
        data = get_algorithm("dijkstra").to_dict()
        assert data["id"] == "dijkstra"
        assert data["category"] == GRAPH
        assert data["params"] == ["nodes", "edges", "startNode"]
        assert set(data["complexity"]) == {"time", "space"}
        assert "fn" not in data


class TestLookups:
    def test_unknown_key_is_none(self):
        assert get_algorithm("bogo-sort") is None

    def test_by_tag(self):
        keys = {a.key for a in algorithms_by_tag("stable")}
        assert {"bubble-sort", "merge-sort"} <= keys

    def test_run_algorithm(self):
        steps = run_algorithm("bubble-sort", [3, 1, 2])
        assert steps[-1].result == [1, 2, 3]

    def test_run_unknown_raises(self):
        with pytest.raises(KeyError):
            run_algorithm("bogo-sort", [1])


class TestEveryAlgorithmOnItsSample:
    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_trace_ends_in_one_final_step(self, key):
        info = get_algorithm(key)
        payload = generate_sample_input(key, rng=random.Random(0))
        steps = list(info.fn(*extract_args(info, payload)))
        assert steps[-1].is_final
        assert sum(s.is_final for s in steps) == 1
        assert [s.step_number for s in steps] == list(range(len(steps)))
        assert all(0 <= s.pseudocode_line < len(info.pseudocode) for s in steps)

    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_steps_serialise(self, key):
        info = get_algorithm(key)
        payload = generate_sample_input(key, rng=random.Random(0))
        for step in info.fn(*extract_args(info, payload)):
            data = step.to_dict()
            assert data["type"] == step.type
