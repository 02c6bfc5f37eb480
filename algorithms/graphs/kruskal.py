"""
kruskal.py — Kruskal's Minimum Spanning Tree
============================================
Edges are considered in ascending weight order (stable on ties, so the
caller's edge order breaks them).  An edge joins the tree when its ends
sit in different components; the run stops once |V|-1 edges are in.
On a disconnected graph the result is a minimum spanning forest.

Components are tracked by DisjointSet: parent / rank arrays indexed by
node position, path compression in find, union by rank.
"""

from typing import Generator, List, Sequence

from graph import Edge, Graph
from algorithms.step import GraphStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def kruskal(graph):",                        # 0
    "    sort edges by weight",                   # 1
    "    make_set(v) for v in V",                 # 2
    "    for (u, v, w) in edges:",                # 3
    "        if find(u) != find(v):",             # 4
    "            union(u, v); mst.add(u, v)",     # 5
    "        else: skip (would form a cycle)",    # 6
    "        if |mst| == |V| - 1: break",         # 7
    "    return mst",                             # 8
]


# ---------------------------------------------------------------------------
# Union-find
# ---------------------------------------------------------------------------
class DisjointSet:
    """Union-find over the integers 0 .. size-1."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.rank   = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def kruskal(nodes: Sequence, edges: Sequence) -> Generator[Step, None, None]:
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)
    index = {nid: i for i, nid in enumerate(g.node_ids())}
    ds = DisjointSet(len(index))

    ordered = sorted(g.edges.values(), key=lambda e: e.weight)
    mst: List[Edge] = []
    cost = 0
    target_size = max(g.node_count() - 1, 0)

    yield sb.build("start", "Sorted edges by weight", line=1, mst_edges=mst, mst_cost=cost)

    for edge in ordered:
        if len(mst) >= target_size:
            break
        u, v = edge.source, edge.target
        yield sb.build(
            "check-edge",
            f"Checking edge {u}-{v} (weight {edge.weight})",
            line=4,
            processing=[u, v],
            highlight=[edge],
            mst_edges=mst,
            mst_cost=cost,
        )
        if ds.union(index[u], index[v]):
            edge.in_mst = True
            g.nodes[u].visited = True
            g.nodes[v].visited = True
            mst.append(edge)
            cost += edge.weight
            yield sb.build(
                "add-edge",
                f"Added edge {u}-{v} to MST",
                line=5,
                processing=[u, v],
                highlight=[edge],
                mst_edges=mst,
                mst_cost=cost,
            )
        else:
            yield sb.build(
                "skip-edge",
                f"Skipped edge {u}-{v} (would create cycle)",
                line=6,
                highlight=[edge],
                mst_edges=mst,
                mst_cost=cost,
            )

    yield sb.complete(
        f"Kruskal's algorithm complete. MST weight: {cost}",
        result=mst_result(mst, cost),
        line=8,
        mst_edges=mst,
        mst_cost=cost,
    )


def mst_result(mst: List[Edge], cost: float) -> dict:
    return {
        "edges": [{"id": e.id, "source": e.source, "target": e.target, "weight": e.weight} for e in mst],
        "cost":  cost,
    }
