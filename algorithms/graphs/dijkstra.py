"""
dijkstra.py — Dijkstra's Algorithm
==================================
Single-source shortest paths over non-negative weights, edges read in
both directions.  The next node to settle is the unvisited node with
the smallest finite distance; ties go to the node listed first by the
caller.  The run ends when no reachable unvisited node remains.

Edges on the current shortest-path tree are flagged `selected`.
"""

import math
from typing import Dict, Generator, List, Optional, Sequence

from graph import Edge, Graph
from algorithms.step import GraphStepBuilder, Step, finite_or_none


PSEUDOCODE: List[str] = [
    "def dijkstra(graph, source):",               # 0
    "    dist[v] ← ∞ for all v; dist[source] ← 0",  # 1
    "    while an unvisited node has dist < ∞:",  # 2
    "        u ← unvisited node with min dist",   # 3
    "        mark u visited",                     # 4
    "        for (v, w) in adj(u):",              # 5
    "            if dist[u] + w < dist[v]:",      # 6
    "                dist[v] ← dist[u] + w",      # 7
    "                parent[v] ← u",              # 8
    "    return dist",                            # 9
]


def dijkstra(nodes: Sequence, edges: Sequence, start_node: str) -> Generator[Step, None, None]:
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)

    g.require_node(start_node).distance = 0
    dist: Dict[str, float] = {nid: math.inf for nid in g.node_ids()}
    dist[start_node] = 0
    tree_edge: Dict[str, Edge] = {}
    order: List[str] = []

    yield sb.build(
        "start",
        f"Starting Dijkstra from node {start_node}",
        line=1,
        processing=[start_node],
        current_node=start_node,
        distances=_snapshot(dist),
    )

    while True:
        u = _closest_unvisited(g, dist)
        if u is None:
            break
        g.nodes[u].visited = True
        order.append(u)
        yield sb.build(
            "visit",
            f"Visiting node {u} with distance {dist[u]}",
            line=4,
            processing=[u],
            current_node=u,
            visited=list(order),
            distances=_snapshot(dist),
        )

        for v, edge in g.neighbours(u):
            if g.nodes[v].visited:
                continue
            candidate = dist[u] + edge.weight
            yield sb.build(
                "check-neighbor",
                f"Checking neighbor {v}: {dist[u]} + {edge.weight} = {candidate} vs current {finite_or_none(dist[v])}",
                line=6,
                processing=[u, v],
                highlight=[edge],
                current_node=u,
                visited=list(order),
                distances=_snapshot(dist),
            )
            if candidate < dist[v]:
                dist[v] = candidate
                target = g.nodes[v]
                target.distance = candidate
                target.parent   = u
                if v in tree_edge:
                    tree_edge[v].selected = False
                edge.selected = True
                tree_edge[v]  = edge
                yield sb.build(
                    "update-distance",
                    f"Updated distance to {v}: {candidate}",
                    line=7,
                    processing=[v],
                    highlight=[edge],
                    current_node=u,
                    visited=list(order),
                    distances=_snapshot(dist),
                )

    distances = _snapshot(dist)
    yield sb.complete(
        "Dijkstra's algorithm complete",
        result=distances,
        line=9,
        visited=list(order),
        distances=distances,
    )


def _closest_unvisited(g: Graph, dist: Dict[str, float]) -> Optional[str]:
    best: Optional[str] = None
    for nid in g.node_ids():
        if g.nodes[nid].visited or math.isinf(dist[nid]):
            continue
        if best is None or dist[nid] < dist[best]:
            best = nid
    return best


def _snapshot(dist: Dict[str, float]) -> Dict[str, Optional[float]]:
    return {nid: finite_or_none(d) for nid, d in dist.items()}
