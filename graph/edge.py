"""
edge.py — Graph Edge
====================
Connects two nodes and carries the flags the trace uses to annotate it
(highlighted / selected / in-MST).

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - An edge has no direction of its own.  Each algorithm decides whether
    it reads the edge one way (Bellman-Ford, Floyd-Warshall) or both ways
    (BFS, DFS, Dijkstra, Kruskal, Prim).
  - `id` is assigned by the Graph from the caller's edge order when the
    caller does not supply one, so two parallel edges stay distinct.
"""

from typing import Optional, Dict, Any


class Edge:
    """
    Attributes:
        id          : Unique identifier within one graph.
        source      : ID of the tail node.
        target      : ID of the head node.
        weight      : Numeric cost. Can be negative for Bellman-Ford demos.
        highlighted : The edge the current step is looking at.
        selected    : On the current shortest-path tree.
        in_mst      : Chosen by Kruskal / Prim.
    """

    __slots__ = ("id", "source", "target", "weight", "highlighted", "selected", "in_mst")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
        highlighted: bool = False,
        selected: bool = False,
        in_mst: bool = False,
    ):
        self.id:          str   = edge_id or f"{source}-{target}"
        self.source:      str   = source
        self.target:      str   = target
        self.weight:      float = weight
        self.highlighted: bool  = highlighted
        self.selected:    bool  = selected
        self.in_mst:      bool  = in_mst

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.highlighted = False
        self.selected    = False
        self.in_mst      = False

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def copy(self, **changes: Any) -> "Edge":
        edge = Edge(
            source=self.source,
            target=self.target,
            weight=self.weight,
            edge_id=self.id,
            highlighted=self.highlighted,
            selected=self.selected,
            in_mst=self.in_mst,
        )
        for key, value in changes.items():
            setattr(edge, key, value)
        return edge

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.id,
            "source":      self.source,
            "target":      self.target,
            "weight":      self.weight,
            "highlighted": self.highlighted,
            "selected":    self.selected,
            "inMST":       self.in_mst,
        }

    @classmethod
    def from_dict(cls, data: dict, edge_id: Optional[str] = None) -> "Edge":
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            weight=data.get("weight", 1.0),
            edge_id=data.get("id", edge_id),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
