"""
prim.py — Prim's Minimum Spanning Tree
======================================
Grows a tree from the start node, each time adding the lightest edge
that crosses from the tree to a node outside it (ties: first such edge
in the caller's edge order).  When no crossing edge remains before every
node is in, the graph is disconnected and the partial tree is returned.
"""

from typing import Generator, List, Optional, Sequence

from graph import Edge, Graph
from algorithms.graphs.kruskal import mst_result
from algorithms.step import GraphStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def prim(graph, source):",                   # 0
    "    tree ← {source}",                        # 1
    "    while |tree| < |V|:",                    # 2
    "        e ← lightest edge (u ∈ tree, v ∉ tree)",  # 3
    "        if no such edge: break",             # 4
    "        tree.add(v); mst.add(e)",            # 5
    "    return mst",                             # 6
]


def prim(nodes: Sequence, edges: Sequence, start_node: str) -> Generator[Step, None, None]:
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)
    g.require_node(start_node).visited = True

    in_tree = {start_node}
    order: List[str] = [start_node]
    mst: List[Edge] = []
    cost = 0

    yield sb.build(
        "start",
        f"Starting Prim's algorithm from node {start_node}",
        line=1,
        processing=[start_node],
        current_node=start_node,
        visited=list(order),
        mst_edges=mst,
        mst_cost=cost,
    )

    while len(in_tree) < g.node_count():
        best: Optional[Edge] = None
        for edge in g.edges.values():
            if (edge.source in in_tree) == (edge.target in in_tree):
                continue
            if best is None or edge.weight < best.weight:
                best = edge
        if best is None:
            break

        new_node = best.target if best.source in in_tree else best.source
        in_tree.add(new_node)
        order.append(new_node)
        g.nodes[new_node].visited = True
        g.nodes[new_node].parent  = best.other_end(new_node)
        best.in_mst = True
        mst.append(best)
        cost += best.weight

        yield sb.build(
            "add-edge",
            f"Added edge {best.source}-{best.target} (weight {best.weight}) to MST",
            line=5,
            processing=[new_node],
            highlight=[best],
            current_node=new_node,
            visited=list(order),
            mst_edges=mst,
            mst_cost=cost,
        )

    yield sb.complete(
        f"Prim's algorithm complete. MST weight: {cost}",
        result=mst_result(mst, cost),
        line=6,
        visited=list(order),
        mst_edges=mst,
        mst_cost=cost,
    )
