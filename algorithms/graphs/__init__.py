"""
algorithms/graphs/
------------------
Traversal, shortest-path and spanning-tree algorithms over caller node /
edge lists.  Each run works on its own Graph copy; the caller's objects
are never touched.
"""

from algorithms.graphs.bellman_ford   import bellman_ford
from algorithms.graphs.bfs            import bfs
from algorithms.graphs.dfs            import dfs
from algorithms.graphs.dijkstra       import dijkstra
from algorithms.graphs.floyd_warshall import floyd_warshall
from algorithms.graphs.kruskal        import DisjointSet, kruskal
from algorithms.graphs.prim           import prim

__all__ = [
    "DisjointSet",
    "bellman_ford",
    "bfs",
    "dfs",
    "dijkstra",
    "floyd_warshall",
    "kruskal",
    "prim",
]
