"""Tests for traversal, shortest-path and spanning-tree generators."""

import itertools
import random

import pytest

from algorithms.graphs import DisjointSet, bellman_ford, bfs, dfs, dijkstra, floyd_warshall, kruskal, prim


def _run(fn, graph, with_start=True):
    args = [graph["nodes"], graph["edges"]]
    if with_start:
        args.append(graph["startNode"])
    return list(fn(*args))


def _random_graph(rng, size, density=0.5, low=1, high=9):
    nodes = [{"id": f"N{i}"} for i in range(size)]
    edges = [
        {"source": f"N{a}", "target": f"N{b}", "weight": rng.randint(low, high)}
        for a, b in itertools.combinations(range(size), 2)
        if rng.random() < density
    ]
    return {"nodes": nodes, "edges": edges, "startNode": "N0"}


# --- Traversals ---

class TestBFS:
    def test_visit_order(self, sample_graph):
        steps = _run(bfs, sample_graph)
        assert steps[-1].result == ["A", "B", "D", "C", "E"]

    def test_queue_snapshot_after_first_visit(self, sample_graph):
        enqueues = [s for s in _run(bfs, sample_graph) if s.type == "enqueue"]
        assert enqueues[1].queue == ("B", "D")

    def test_unreachable_nodes_not_visited(self):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
                 "edges": [{"source": "A", "target": "B"}], "startNode": "A"}
        assert _run(bfs, graph)[-1].result == ["A", "B"]

    def test_unknown_start_raises(self, sample_graph):
        with pytest.raises(ValueError, match="Unknown node id"):
            list(bfs(sample_graph["nodes"], sample_graph["edges"], "Z"))

    def test_caller_input_untouched(self, sample_graph):
        before = repr(sample_graph)
        _run(bfs, sample_graph)
        assert repr(sample_graph) == before


class TestDFS:
    def test_visit_order(self, sample_graph):
        assert _run(dfs, sample_graph)[-1].result == ["A", "B", "C", "E", "D"]

    def test_already_visited_pops_are_reported(self, sample_graph):
        types = [s.type for s in _run(dfs, sample_graph)]
        assert "pop-visited" in types

    def test_visits_each_reachable_node_once(self, sample_graph):
        visits = [s.current_node for s in _run(dfs, sample_graph) if s.type == "visit"]
        assert sorted(visits) == ["A", "B", "C", "D", "E"]


# --- Shortest paths ---

class TestDijkstra:
    def test_sample_graph_distances(self, sample_graph):
        final = _run(dijkstra, sample_graph)[-1]
        assert final.result == {"A": 0, "B": 3, "C": 6, "D": 2, "E": 5}

    def test_shortest_path_tree_edges_selected(self, sample_graph):
        final = _run(dijkstra, sample_graph)[-1]
        selected = {(e.source, e.target) for e in final.edges if e.selected}
        assert selected == {("A", "D"), ("B", "C"), ("B", "D"), ("D", "E")}

    def test_unreachable_is_none(self):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [], "startNode": "A"}
        assert _run(dijkstra, graph)[-1].result == {"A": 0, "B": None}

    def test_distances_only_decrease(self, sample_graph):
        last = {}
        for step in _run(dijkstra, sample_graph):
            for node, d in (step.distances or {}).items():
                if d is not None and last.get(node) is not None:
                    assert d <= last[node]
                if d is not None:
                    last[node] = d

    def test_matches_bellman_ford_on_random_graphs(self):
        rng = random.Random(3)
        for _ in range(10):
            graph = _random_graph(rng, 6)
            # make the edge set symmetric so directed Bellman-Ford sees the same graph
            graph["edges"] += [{"source": e["target"], "target": e["source"], "weight": e["weight"]} for e in graph["edges"]]
            assert _run(dijkstra, graph)[-1].result == _run(bellman_ford, graph)[-1].result


class TestBellmanFord:
    def test_directed_distances(self, sample_graph):
        final = _run(bellman_ford, sample_graph)[-1]
        assert final.type == "complete"
        assert final.result == {"A": 0, "B": 4, "C": 7, "D": 2, "E": 5}

    def test_iteration_count(self, sample_graph):
        iterations = [s for s in _run(bellman_ford, sample_graph) if s.type == "iteration"]
        assert [s.iteration for s in iterations] == [1, 2, 3, 4]

    def test_negative_cycle_terminal_step(self, negative_cycle_graph):
        steps = _run(bellman_ford, negative_cycle_graph)
        final = steps[-1]
        assert final.type == "negative-cycle"
        assert final.is_final
        assert final.result["negative_cycle"] is True
        assert "complete" not in [s.type for s in steps]

    def test_negative_edge_without_cycle(self):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
            "edges": [
                {"source": "A", "target": "B", "weight": 4},
                {"source": "A", "target": "C", "weight": 5},
                {"source": "C", "target": "B", "weight": -3},
            ],
            "startNode": "A",
        }
        assert _run(bellman_ford, graph)[-1].result == {"A": 0, "B": 2, "C": 5}


class TestFloydWarshall:
    def test_all_pairs(self, sample_graph):
        result = _run(floyd_warshall, sample_graph, with_start=False)[-1].result
        assert result["A"]["E"] == 5
        assert result["A"]["C"] == 7
        assert result["E"]["A"] is None
        assert all(result[n][n] == 0 for n in result)

    def test_matrix_snapshot_shape(self, sample_graph):
        first = _run(floyd_warshall, sample_graph, with_start=False)[0]
        assert len(first.matrix) == 5
        assert first.matrix[0][1] == 4

    def test_agrees_with_bellman_ford_from_each_source(self):
        rng = random.Random(5)
        graph = _random_graph(rng, 5, density=0.7)
        matrix = _run(floyd_warshall, graph, with_start=False)[-1].result
        for node in graph["nodes"]:
            graph["startNode"] = node["id"]
            assert _run(bellman_ford, graph)[-1].result == matrix[node["id"]]


# --- Spanning trees ---

class TestDisjointSet:
    def test_union_and_find(self):
        ds = DisjointSet(4)
        assert ds.union(0, 1)
        assert ds.union(2, 3)
        assert not ds.union(1, 0)
        assert ds.find(0) == ds.find(1)
        assert ds.find(0) != ds.find(2)


class TestKruskal:
    def test_sample_graph_mst(self, sample_graph):
        result = _run(kruskal, sample_graph, with_start=False)[-1].result
        assert result["cost"] == 9
        assert [(e["source"], e["target"]) for e in result["edges"]] == [
            ("B", "D"), ("A", "D"), ("B", "C"), ("D", "E"),
        ]

    def test_cycle_edge_skipped(self):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
            "edges": [
                {"source": "A", "target": "B", "weight": 1},
                {"source": "B", "target": "C", "weight": 2},
                {"source": "A", "target": "C", "weight": 3},
            ],
        }
        steps = list(kruskal(graph["nodes"], graph["edges"]))
        assert steps[-1].result["cost"] == 3
        # the third edge is never checked once |V|-1 edges are in
        assert "skip-edge" not in [s.type for s in steps]

    def test_disconnected_graph_gives_forest(self):
        nodes = [{"id": n} for n in "ABCD"]
        edges = [{"source": "A", "target": "B", "weight": 1}, {"source": "C", "target": "D", "weight": 2}]
        result = list(kruskal(nodes, edges))[-1].result
        assert result["cost"] == 3 and len(result["edges"]) == 2


class TestPrim:
    def test_sample_graph_mst(self, sample_graph):
        final = _run(prim, sample_graph)[-1]
        assert final.result["cost"] == 9
        assert final.visited == ("A", "D", "B", "C", "E")

    def test_stops_when_graph_disconnected(self):
        nodes = [{"id": n} for n in "ABC"]
        edges = [{"source": "A", "target": "B", "weight": 1}]
        result = list(prim(nodes, edges, "A"))[-1].result
        assert result["cost"] == 1 and len(result["edges"]) == 1

    def test_same_cost_as_kruskal_on_random_graphs(self):
        rng = random.Random(9)
        for _ in range(10):
            graph = _random_graph(rng, 7, density=1.0)
            prim_cost = _run(prim, graph)[-1].result["cost"]
            kruskal_cost = _run(kruskal, graph, with_start=False)[-1].result["cost"]
            assert prim_cost == kruskal_cost
