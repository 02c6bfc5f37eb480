from typing import Optional, Dict, Any


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Caller-supplied identity (id) and presentation coordinates, plus the
    transient annotations graph algorithms write while they run.

    Attributes:
        id         : Unique, stable key supplied by the caller.
        x, y       : Canvas coordinates (presentation only, never read by algorithms).
        visited    : Fully processed by the current algorithm.
        distance   : Current shortest-known distance (None = unreachable / ∞).
        parent     : Node-id of the predecessor on the best known path.
        in_queue   : Sitting in the BFS queue right now.
        processing : The node (or nodes) the current step is about.
    """

    __slots__ = ("id", "x", "y", "visited", "distance", "parent", "in_queue", "processing")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        visited: bool = False,
        distance: Optional[float] = None,
        parent: Optional[str] = None,
        in_queue: bool = False,
        processing: bool = False,
    ):
        self.id:         str             = node_id
        self.x:          float           = x
        self.y:          float           = y
        self.visited:    bool            = visited
        self.distance:   Optional[float] = distance
        self.parent:     Optional[str]   = parent
        self.in_queue:   bool            = in_queue
        self.processing: bool            = processing

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_algo_state(self) -> None:
        """Clear every annotation, keep identity and position."""
        self.visited    = False
        self.distance   = None
        self.parent     = None
        self.in_queue   = False
        self.processing = False

    def copy(self, **changes: Any) -> "Node":
        """Independent copy; keyword arguments override annotations on the copy only."""
        node = Node(
            node_id=self.id,
            x=self.x,
            y=self.y,
            visited=self.visited,
            distance=self.distance,
            parent=self.parent,
            in_queue=self.in_queue,
            processing=self.processing,
        )
        for key, value in changes.items():
            setattr(node, key, value)
        return node

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":         self.id,
            "x":          self.x,
            "y":          self.y,
            "visited":    self.visited,
            "distance":   self.distance,
            "parent":     self.parent,
            "inQueue":    self.in_queue,
            "processing": self.processing,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        # annotations coming from a caller are ignored; a run starts clean
        return cls(node_id=str(data["id"]), x=data.get("x", 0.0), y=data.get("y", 0.0))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, visited={self.visited}, distance={self.distance})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
