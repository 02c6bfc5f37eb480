"""Tests for the Recorder: validation, truncation, metrics, storage."""

import logging

import pytest

from algorithms import get_algorithm
from engine import ExecutionResult, InvalidInputError, Recorder, UnknownAlgorithmError


class TestRun:
    def test_output_is_final_result(self, recorder):
        result = recorder.run("bubble-sort", {"array": [5, 2, 4, 1, 3]})
        assert isinstance(result, ExecutionResult)
        assert result.output == [1, 2, 3, 4, 5]
        assert result.steps[-1].is_final

    def test_result_is_stored(self, recorder, store):
        result = recorder.run("binary-search", {"array": [1, 3, 5, 7, 9, 11], "target": 7})
        assert store.get(result.id) is result
        assert result.output == {"found": True, "index": 3}

    def test_no_store(self):
        result = Recorder().run("fibonacci-dp", 10)
        assert result.output == 55
        assert result.id == ""

    def test_numeric_node_ids_with_start_zero(self, recorder):
        graph = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1}], "startNode": 0}
        assert recorder.run("bfs", graph).output == ["0", "1"]

    def test_unknown_algorithm(self, recorder):
        with pytest.raises(UnknownAlgorithmError):
            recorder.run("bogo-sort", [1])

    def test_invalid_input(self, recorder, store):
        with pytest.raises(InvalidInputError) as exc_info:
            recorder.run("bubble-sort", {"array": "nope"})
        assert exc_info.value.errors
        assert len(store) == 0

    def test_engine_value_error_becomes_invalid_input(self, recorder, monkeypatch):
        def broken(numbers):
            raise ValueError("bad numbers")
            yield

        monkeypatch.setattr(get_algorithm("bubble-sort"), "fn", broken)
        with pytest.raises(InvalidInputError, match="bad numbers"):
            recorder.run("bubble-sort", [1, 2])


class TestTruncation:
    def test_options_max_steps(self, recorder):
        result = recorder.run("bubble-sort", [5, 4, 3, 2, 1], {"maxSteps": 3})
        assert result.total_steps == 3
        assert result.metrics.truncated
        assert result.metrics.raw_steps > 3
        # the answer survives truncation
        assert result.output == [1, 2, 3, 4, 5]

    def test_default_budget(self):
        result = Recorder(max_steps=2).run("bubble-sort", [2, 1])
        assert result.total_steps == 2

    def test_budget_larger_than_trace(self, recorder):
        result = recorder.run("bubble-sort", [1, 2], {"maxSteps": 1000})
        assert not result.metrics.truncated
        assert result.metrics.total_steps == result.metrics.raw_steps

    @pytest.mark.parametrize("bad", [0, -1, "10", 2.5, True])
    def test_invalid_budget(self, recorder, bad):
        with pytest.raises(InvalidInputError, match="maxSteps"):
            recorder.run("bubble-sort", [2, 1], {"maxSteps": bad})

    def test_truncation_is_logged(self, recorder, caplog):
        with caplog.at_level(logging.INFO, logger="engine.recorder"):
            recorder.run("bubble-sort", [3, 2, 1], {"maxSteps": 2})
        assert "Truncated bubble-sort trace" in caplog.text


class TestMetrics:
    def test_step_counts(self, recorder):
        metrics = recorder.run("bubble-sort", [5, 2, 4, 1, 3]).metrics
        assert metrics.step_counts["sorted"] == 4
        assert metrics.step_counts["complete"] == 1
        assert sum(metrics.step_counts.values()) == metrics.raw_steps

    def test_identity_fields(self, recorder):
        metrics = recorder.run("kmp", {"text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB"}).metrics
        assert (metrics.algo_key, metrics.algo_label, metrics.category) == ("kmp", "Knuth-Morris-Pratt (KMP)", "string")
        assert metrics.final_step_type == "complete"
        assert metrics.wall_time_ms >= 0

    def test_negative_cycle_final_type(self, recorder, negative_cycle_graph):
        result = recorder.run("bellman-ford", negative_cycle_graph)
        assert result.metrics.final_step_type == "negative-cycle"
        assert result.output["negative_cycle"] is True


class TestSerialisation:
    def test_to_dict(self, recorder, sample_graph):
        data = recorder.run("dijkstra", sample_graph).to_dict()
        assert data["algorithmId"] == "dijkstra"
        assert data["output"]["E"] == 5
        assert data["totalSteps"] == len(data["steps"])
        assert data["metrics"]["algorithmId"] == "dijkstra"
        assert isinstance(data["steps"][0]["nodes"][0], dict)

    def test_unreachable_distance_serialises_as_none(self, recorder):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [], "startNode": "A"}
        assert recorder.run("dijkstra", graph).to_dict()["output"] == {"A": 0, "B": None}
