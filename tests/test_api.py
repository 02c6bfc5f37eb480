"""Tests for the Flask JSON API."""

import pytest


class TestCatalogue:
    def test_list_all(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["total"] == len(data["algorithms"]) == 43

    def test_filter_by_category(self, client):
        data = client.get("/api/algorithms?category=searching").get_json()
        assert data["total"] == 7
        assert {a["category"] for a in data["algorithms"]} == {"searching"}

    def test_unknown_category(self, client):
        resp = client.get("/api/algorithms?category=quantum")
        assert resp.status_code == 400
        assert "details" in resp.get_json()

    def test_single_algorithm(self, client):
        data = client.get("/api/algorithms/kmp").get_json()
        assert data["id"] == "kmp"
        assert data["pseudocode"]

    def test_unknown_algorithm(self, client):
        resp = client.get("/api/algorithms/bogo-sort")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Algorithm bogo-sort not found"


class TestExecute:
    def test_run_and_fetch(self, client):
        resp = client.post("/api/execute/algorithm", json={
            "algorithmId": "coin-change",
            "input": {"coins": [1, 2, 5], "amount": 11},
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["output"] == 3
        assert data["steps"][-1]["is_final"] is True

        status = client.get(f"/api/execute/status/{data['id']}")
        assert status.status_code == 200
        assert status.get_json()["output"] == 3

    def test_dijkstra_sample_graph(self, client, sample_graph):
        data = client.post("/api/execute/algorithm", json={"algorithmId": "dijkstra", "input": sample_graph}).get_json()
        assert data["output"]["E"] == 5

    def test_options_max_steps(self, client):
        data = client.post("/api/execute/algorithm", json={
            "algorithmId": "bubble-sort",
            "input": {"array": [5, 4, 3, 2, 1]},
            "options": {"maxSteps": 4},
        }).get_json()
        assert data["totalSteps"] == 4
        assert data["truncated"] is True
        assert data["output"] == [1, 2, 3, 4, 5]

    def test_config_step_budget_applies(self, client):
        # app_config caps traces at 500 steps
        data = client.post("/api/execute/algorithm", json={
            "algorithmId": "bubble-sort",
            "input": {"array": list(range(60, 0, -1))},
        }).get_json()
        assert data["totalSteps"] == 500
        assert data["metrics"]["rawSteps"] > 500

    def test_invalid_input(self, client):
        resp = client.post("/api/execute/algorithm", json={"algorithmId": "binary-search", "input": {"array": [3, 1], "target": 1}})
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["details"] == ["Array must be sorted for this search algorithm"]

    def test_unknown_algorithm(self, client):
        resp = client.post("/api/execute/algorithm", json={"algorithmId": "bogo-sort", "input": [1]})
        assert resp.status_code == 404

    @pytest.mark.parametrize("body", [None, [], {"input": [1]}, {"algorithmId": ""}])
    def test_malformed_body(self, client, body):
        resp = client.post("/api/execute/algorithm", json=body)
        assert resp.status_code == 400

    def test_non_object_options(self, client):
        resp = client.post("/api/execute/algorithm", json={"algorithmId": "bubble-sort", "input": [1], "options": [1]})
        assert resp.status_code == 400

    def test_rejection_is_logged(self, client, caplog):
        with caplog.at_level("WARNING", logger="main"):
            client.post("/api/execute/algorithm", json={"algorithmId": "bubble-sort", "input": {}})
        assert "Rejected POST /api/execute/algorithm" in caplog.text


class TestExecutionLifecycle:
    def test_unknown_execution(self, client):
        assert client.get("/api/execute/status/nope").status_code == 404

    def test_cancel(self, client):
        execution_id = client.post("/api/execute/algorithm", json={"algorithmId": "fibonacci-dp", "input": 5}).get_json()["id"]
        resp = client.delete(f"/api/execute/cancel/{execution_id}")
        assert resp.status_code == 200
        assert resp.get_json() == {"id": execution_id, "cancelled": True}
        assert client.get(f"/api/execute/status/{execution_id}").status_code == 404

    def test_cancel_unknown(self, client):
        assert client.delete("/api/execute/cancel/nope").status_code == 404


class TestSampleInput:
    def test_sample_then_execute(self, client):
        sample = client.get("/api/execute/sample-input/kruskal").get_json()
        assert sample["algorithmId"] == "kruskal"
        data = client.post("/api/execute/algorithm", json={"algorithmId": "kruskal", "input": sample["input"]}).get_json()
        assert data["output"]["cost"] == 9

    def test_unknown(self, client):
        assert client.get("/api/execute/sample-input/bogo-sort").status_code == 404


class TestValidate:
    def test_valid(self, client):
        data = client.post("/api/execute/validate", json={"algorithmId": "kmp", "input": {"text": "a", "pattern": "a"}}).get_json()
        assert data == {"algorithmId": "kmp", "valid": True, "errors": []}

    def test_invalid(self, client):
        data = client.post("/api/execute/validate", json={"algorithmId": "radix-sort", "input": {"array": [-1]}}).get_json()
        assert data["valid"] is False
        assert data["errors"] == ["Radix sort requires positive integers"]

    def test_unknown_algorithm(self, client):
        resp = client.post("/api/execute/validate", json={"algorithmId": "bogo-sort", "input": {}})
        assert resp.status_code == 404
