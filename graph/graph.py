"""
graph.py — Graph Container
==========================
Working copy of a caller-supplied graph.  Algorithms read adjacency from
here and write annotations onto the copied nodes / edges, so the objects
the caller handed in are never touched.

Responsibilities:
  1. Build from node / edge lists (dicts or Node / Edge objects)
  2. Undirected adjacency queries        (neighbours)
  3. Directed edge view                  (directed_edges)

Design decisions:
  - Nodes & edges stored in insertion-ordered dicts keyed by id, so every
    iteration order is the caller's order and runs are reproducible.
  - `_adj[node_id] → [(neighbour_id, edge_id)]` lists every edge from both
    ends, in edge order.  Parallel edges stay separate entries.
"""

from typing import Dict, Iterable, List, Tuple, Union

from graph.node import Node
from graph.edge import Edge


NodeLike = Union[Node, dict]
EdgeLike = Union[Edge, dict]


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {edge_id: Edge}
        _adj  : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}
        self._adj:  Dict[str, List[Tuple[str, str]]] = {}

    @classmethod
    def from_lists(cls, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> "Graph":
        """
        Copy caller input into a fresh Graph.

        Raises:
            ValueError: duplicate node id, or an edge endpoint that is not a node.
        """
        g = cls()
        for raw in nodes:
            node = raw.copy() if isinstance(raw, Node) else Node.from_dict(raw)
            node.reset_algo_state()
            if node.id in g.nodes:
                raise ValueError(f"Duplicate node id: {node.id}")
            g.add_node(node)

        for i, raw in enumerate(edges):
            edge = raw.copy() if isinstance(raw, Edge) else Edge.from_dict(raw, edge_id=f"e{i}")
            edge.reset()
            if edge.id in g.edges:
                edge.id = f"{edge.id}#{i}"
            for end in (edge.source, edge.target):
                if end not in g.nodes:
                    raise ValueError(f"Edge {edge.source}-{edge.target} references unknown node '{end}'")
            g.add_edge(edge)
        return g

    # ==================================================================
    # CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append((edge.target, edge.id))
        if edge.target != edge.source:
            self._adj.setdefault(edge.target, []).append((edge.source, edge.id))
        return edge

    def require_node(self, node_id: str) -> Node:
        """Node by id; an unknown id is a ValueError."""
        node = self.nodes.get(node_id)
        if node is None:
            raise ValueError(f"Unknown node id: {node_id}")
        return node

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] treating every edge as undirected."""
        return [(nbr_id, self.edges[eid]) for nbr_id, eid in self._adj.get(node_id, [])]

    def directed_edges(self) -> List[Edge]:
        """Edges exactly as supplied: source → target."""
        return list(self.edges.values())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
