"""
dfs.py — Depth-First Search
===========================
Iterative DFS over an explicit stack.  Neighbours are pushed in reverse
adjacency order so they are popped, and therefore visited, in their
original order.  A node can sit on the stack more than once; a stale pop
of an already-visited node is reported as `pop-visited` and skipped.
"""

from typing import Generator, List, Optional, Sequence, Tuple

from graph import Graph
from algorithms.step import GraphStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def DFS(graph, source):",                    # 0
    "    stack ← [source]",                       # 1
    "    while stack is not empty:",              # 2
    "        node ← stack.pop()",                 # 3
    "        if node visited: continue",          # 4
    "        visit(node)",                        # 5
    "        for neighbour in reversed(adj(node)):",  # 6
    "            if neighbour not visited:",      # 7
    "                stack.push(neighbour)",      # 8
    "    return visit order",                     # 9
]


def dfs(nodes: Sequence, edges: Sequence, start_node: str) -> Generator[Step, None, None]:
    g  = Graph.from_lists(nodes, edges)
    sb = GraphStepBuilder(g)
    g.require_node(start_node)

    # entries are (node_id, pushed_from)
    stack: List[Tuple[str, Optional[str]]] = [(start_node, None)]
    order: List[str] = []

    yield sb.build(
        "start",
        f"Starting DFS from node {start_node}",
        line=1,
        processing=[start_node],
        current_node=start_node,
        stack=[start_node],
    )

    while stack:
        node_id, parent = stack.pop()
        node = g.nodes[node_id]

        if node.visited:
            yield sb.build(
                "pop-visited",
                f"Node {node_id} was already visited, skipping",
                line=4,
                current_node=node_id,
                stack=[s for s, _ in stack],
                visited=list(order),
            )
            continue

        node.visited = True
        node.parent  = parent
        order.append(node_id)
        yield sb.build(
            "visit",
            f"Visiting node {node_id}",
            line=5,
            processing=[node_id],
            current_node=node_id,
            stack=[s for s, _ in stack],
            visited=list(order),
        )

        for nbr_id, edge in reversed(g.neighbours(node_id)):
            if g.nodes[nbr_id].visited:
                continue
            stack.append((nbr_id, node_id))
            yield sb.build(
                "push",
                f"Pushing neighbor {nbr_id} to stack",
                line=8,
                processing=[node_id, nbr_id],
                highlight=[edge],
                current_node=node_id,
                stack=[s for s, _ in stack],
                visited=list(order),
            )

    yield sb.complete(
        f"DFS traversal complete. Visited {len(order)} nodes",
        result=order,
        line=9,
        visited=list(order),
    )
