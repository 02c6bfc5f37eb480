"""Tests for the Graph container and its Node / Edge copies."""

import pytest

from graph import Edge, Graph, Node


class TestFromLists:
    def test_copies_caller_objects(self):
        node = Node("A")
        node.visited = True
        g = Graph.from_lists([node, Node("B")], [Edge("A", "B", 2)])
        assert g.nodes["A"] is not node
        assert g.nodes["A"].visited is False
        assert node.visited is True

    def test_duplicate_node_id_raises(self):
        with pytest.raises(ValueError, match="Duplicate node id"):
            Graph.from_lists([{"id": "A"}, {"id": "A"}], [])

    def test_unknown_endpoint_raises(self):
        with pytest.raises(ValueError, match="unknown node"):
            Graph.from_lists([{"id": "A"}], [{"source": "A", "target": "Z"}])

    def test_edge_ids_default_to_position(self):
        g = Graph.from_lists([{"id": "A"}, {"id": "B"}], [{"source": "A", "target": "B"}])
        assert list(g.edges) == ["e0"]

    def test_integer_ids_become_strings(self):
        g = Graph.from_lists([{"id": 1}, {"id": 2}], [{"source": 1, "target": 2}])
        assert g.node_ids() == ["1", "2"]


class TestAdjacency:
    def test_neighbours_are_undirected(self, sample_graph):
        g = Graph.from_lists(sample_graph["nodes"], sample_graph["edges"])
        assert [nbr for nbr, _ in g.neighbours("E")] == ["C", "D"]

    def test_directed_edges_keep_orientation(self, sample_graph):
        g = Graph.from_lists(sample_graph["nodes"], sample_graph["edges"])
        assert [(e.source, e.target) for e in g.directed_edges()][:2] == [("A", "B"), ("A", "D")]

    def test_require_node(self, sample_graph):
        g = Graph.from_lists(sample_graph["nodes"], sample_graph["edges"])
        assert g.require_node("C").id == "C"
        with pytest.raises(ValueError, match="Unknown node id"):
            g.require_node("Z")

