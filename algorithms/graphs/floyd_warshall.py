"""
floyd_warshall.py — Floyd-Warshall
==================================
All-pairs shortest paths.  The matrix is seeded with 0 on the diagonal
and the direct edge weights (source → target, the lighter of parallel
edges), then every node in turn is tried as an intermediate hop.

Each step carries a snapshot of the matrix in caller node order;
unreachable pairs appear as None.
"""

import math
from typing import Dict, Generator, List, Optional, Sequence

from graph import Graph
from algorithms.step import GraphStepBuilder, Step, finite_or_none


PSEUDOCODE: List[str] = [
    "def floyd_warshall(graph):",                 # 0
    "    dist[i][j] ← w(i, j) or ∞; dist[i][i] ← 0",  # 1
    "    for k in V:",                            # 2
    "        for i in V:",                        # 3
    "            for j in V:",                    # 4
    "                if dist[i][k] + dist[k][j] < dist[i][j]:",  # 5
    "                    dist[i][j] ← dist[i][k] + dist[k][j]",  # 6
    "    return dist",                            # 7
]


def floyd_warshall(nodes: Sequence, edges: Sequence) -> Generator[Step, None, None]:
    g   = Graph.from_lists(nodes, edges)
    sb  = GraphStepBuilder(g)
    ids = g.node_ids()
    index = {nid: i for i, nid in enumerate(ids)}
    n = len(ids)

    dist = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for edge in g.directed_edges():
        i, j = index[edge.source], index[edge.target]
        dist[i][j] = min(dist[i][j], edge.weight)

    yield sb.build(
        "start",
        "Initialized distance matrix from direct edges",
        line=1,
        matrix=_matrix(dist),
    )

    for k in range(n):
        via = ids[k]
        yield sb.build(
            "iteration",
            f"Using {via} as intermediate node",
            line=2,
            processing=[via],
            current_node=via,
            iteration=k,
            matrix=_matrix(dist),
        )
        for i in range(n):
            if math.isinf(dist[i][k]):
                continue
            for j in range(n):
                through = dist[i][k] + dist[k][j]
                if through < dist[i][j]:
                    dist[i][j] = through
                    yield sb.build(
                        "update",
                        f"Updated distance {ids[i]} → {ids[j]} via {via}: {through}",
                        line=6,
                        processing=[ids[i], via, ids[j]],
                        current_node=via,
                        iteration=k,
                        matrix=_matrix(dist),
                    )

    result: Dict[str, Dict[str, Optional[float]]] = {
        ids[i]: {ids[j]: finite_or_none(dist[i][j]) for j in range(n)} for i in range(n)
    }
    yield sb.complete(
        "Floyd-Warshall complete. All shortest paths computed",
        result=result,
        line=7,
        matrix=_matrix(dist),
    )


def _matrix(dist: List[List[float]]) -> List[List[Optional[float]]]:
    return [[finite_or_none(d) for d in row] for row in dist]
