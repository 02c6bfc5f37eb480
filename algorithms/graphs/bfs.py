"""
bfs.py — Breadth-First Search
=============================
Generator-based BFS traversal.  Yields a Step at every meaningful event:
  1. Dequeue a node      →  `visit`
  2. Discover neighbour  →  `enqueue` (each node is enqueued at most once)
  3. Queue exhausted     →  `complete`, result = visit order

Edges are read in both directions.  Pseudocode lines are 0-indexed and
match the PSEUDOCODE constant exported alongside the generator.
"""

from collections import deque
from typing import Generator, List, Sequence

from graph import Graph
from algorithms.step import GraphStepBuilder, Step


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                    # 0
    "    queue ← [source]",                       # 1
    "    discovered ← {source}",                  # 2
    "    while queue is not empty:",              # 3
    "        node ← queue.dequeue()",             # 4
    "        visit(node)",                        # 5
    "        for neighbour in adj(node):",        # 6
    "            if neighbour not discovered:",   # 7
    "                discovered.add(neighbour)",  # 8
    "                queue.enqueue(neighbour)",   # 9
    "    return visit order",                     # 10
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(nodes: Sequence, edges: Sequence, start_node: str) -> Generator[Step, None, None]:
    """
    Args:
        nodes      : Caller node list (dicts or Node objects), never mutated.
        edges      : Caller edge list (dicts or Edge objects), never mutated.
        start_node : Id of the node the traversal starts from.

    Yields:
        GraphStep – start, then visit / enqueue events, then complete.
    """
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)

    source = g.require_node(start_node)
    source.in_queue = True
    queue = deque([start_node])
    discovered = {start_node}
    order: List[str] = []

    yield sb.build(
        "start",
        f"Starting BFS from node {start_node}",
        line=1,
        processing=[start_node],
        current_node=start_node,
        queue=list(queue),
    )

    while queue:
        node_id = queue.popleft()
        node = g.nodes[node_id]
        node.in_queue = False
        node.visited  = True
        order.append(node_id)

        yield sb.build(
            "visit",
            f"Visiting node {node_id}",
            line=5,
            processing=[node_id],
            current_node=node_id,
            queue=list(queue),
            visited=list(order),
        )

        for nbr_id, edge in g.neighbours(node_id):
            if nbr_id in discovered:
                continue
            discovered.add(nbr_id)
            nbr = g.nodes[nbr_id]
            nbr.in_queue = True
            nbr.parent   = node_id
            queue.append(nbr_id)

            yield sb.build(
                "enqueue",
                f"Adding neighbor {nbr_id} to queue",
                line=9,
                processing=[node_id, nbr_id],
                highlight=[edge],
                current_node=node_id,
                queue=list(queue),
                visited=list(order),
            )

    yield sb.complete(
        f"BFS traversal complete. Visited {len(order)} nodes",
        result=order,
        line=10,
        visited=list(order),
    )
