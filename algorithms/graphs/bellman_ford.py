"""
bellman_ford.py — Bellman-Ford
==============================
Single-source shortest paths that tolerate negative weights.  Edges are
read exactly as supplied (source → target).  Runs |V|-1 full relaxation
rounds, then one detection scan: any edge that can still be relaxed
proves a reachable negative cycle.

A negative cycle ends the trace with a terminal `negative-cycle` step
(is_final, result {"negative_cycle": True, "edge": [u, v]}); there is
no `complete` step in that case.
"""

import math
from typing import Dict, Generator, List, Optional, Sequence

from graph import Graph
from algorithms.step import GraphStepBuilder, Step, finite_or_none


PSEUDOCODE: List[str] = [
    "def bellman_ford(graph, source):",           # 0
    "    dist[v] ← ∞ for all v; dist[source] ← 0",  # 1
    "    repeat |V| - 1 times:",                  # 2
    "        for (u, v, w) in edges:",            # 3
    "            if dist[u] + w < dist[v]:",      # 4
    "                dist[v] ← dist[u] + w",      # 5
    "    for (u, v, w) in edges:",                # 6
    "        if dist[u] + w < dist[v]:",          # 7
    "            report negative cycle",          # 8
    "    return dist",                            # 9
]


def bellman_ford(nodes: Sequence, edges: Sequence, start_node: str) -> Generator[Step, None, None]:
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)

    g.require_node(start_node).distance = 0
    dist: Dict[str, float] = {nid: math.inf for nid in g.node_ids()}
    dist[start_node] = 0

    yield sb.build(
        "start",
        f"Starting Bellman-Ford from node {start_node}",
        line=1,
        processing=[start_node],
        current_node=start_node,
        distances=_snapshot(dist),
    )

    rounds = g.node_count() - 1
    for i in range(1, rounds + 1):
        yield sb.build(
            "iteration",
            f"Iteration {i} of {rounds}",
            line=2,
            iteration=i,
            distances=_snapshot(dist),
        )
        for edge in g.directed_edges():
            u, v = edge.source, edge.target
            yield sb.build(
                "check-edge",
                f"Checking edge {u} → {v} (weight {edge.weight})",
                line=4,
                processing=[u, v],
                highlight=[edge],
                iteration=i,
                distances=_snapshot(dist),
            )
            if dist[u] + edge.weight < dist[v]:
                dist[v] = dist[u] + edge.weight
                g.nodes[v].distance = dist[v]
                g.nodes[v].parent   = u
                yield sb.build(
                    "relax",
                    f"Relaxed edge {u} → {v}: new distance {dist[v]}",
                    line=5,
                    processing=[v],
                    highlight=[edge],
                    iteration=i,
                    distances=_snapshot(dist),
                )

    for edge in g.directed_edges():
        u, v = edge.source, edge.target
        yield sb.build(
            "check-edge",
            f"Detection scan: checking edge {u} → {v}",
            line=7,
            processing=[u, v],
            highlight=[edge],
            iteration=rounds + 1,
            distances=_snapshot(dist),
        )
        if dist[u] + edge.weight < dist[v]:
            yield sb.build(
                "negative-cycle",
                f"Negative cycle detected via edge {u} → {v}",
                line=8,
                processing=[u, v],
                highlight=[edge],
                distances=_snapshot(dist),
                is_final=True,
                result={"negative_cycle": True, "edge": [u, v]},
            )
            return

    distances = _snapshot(dist)
    yield sb.complete(
        "Bellman-Ford complete. No negative cycles detected",
        result=distances,
        line=9,
        distances=distances,
    )


def _snapshot(dist: Dict[str, float]) -> Dict[str, Optional[float]]:
    return {nid: finite_or_none(d) for nid, d in dist.items()}
