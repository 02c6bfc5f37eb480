"""
matrix_chain.py — Matrix Chain Multiplication
=============================================
Matrix k has shape dimensions[k] × dimensions[k+1].  cost[i][j] is the
fewest scalar multiplications for the product A(i+1)..A(j+1), filled by
chain length.  Every split that improves the running best is shown as a
`candidate`; the cell is then written once together with its split.
"""

import math
from typing import Generator, List, Optional

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def matrix_chain(d):",                           # 0
    "    cost[i][i] ← 0",                             # 1
    "    for length in 2 .. n:",                      # 2
    "        for i in 0 .. n-length:",                # 3
    "            j ← i + length - 1",                 # 4
    "            for k in i .. j-1:",                 # 5
    "                c ← cost[i][k] + cost[k+1][j] + d[i]·d[k+1]·d[j+1]",  # 6
    "            cost[i][j], split[i][j] ← min c, argmin k",               # 7
    "    return cost[0][n-1]",                        # 8
]


def matrix_chain(dimensions: List[int]) -> Generator[Step, None, None]:
    n = len(dimensions) - 1
    table: List[List[Optional[int]]] = [[0 if i == j else None for j in range(n)] for i in range(n)]
    split = [[0] * n for _ in range(n)]
    sb = DPStepBuilder(table)

    yield sb.build("start", f"Finding optimal matrix multiplication order for {n} matrices", line=1)

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best, best_k = math.inf, i
            for k in range(i, j):
                cost = table[i][k] + table[k + 1][j] + dimensions[i] * dimensions[k + 1] * dimensions[j + 1]
                if cost < best:
                    best, best_k = cost, k
                    yield sb.build(
                        "candidate",
                        f"M[{i}:{j}] split at {k}: cost = {cost}",
                        line=6,
                        current_cell=(i, j),
                        highlighted_cells=[(i, k), (k + 1, j)],
                        candidate=cost,
                    )
            table[i][j] = best
            split[i][j] = best_k
            yield sb.build(
                "fill",
                f"M[{i}:{j}] = {best} (split after matrix {best_k + 1})",
                line=7,
                current_cell=(i, j),
                highlighted_cells=[(i, best_k), (best_k + 1, j)],
            )

    order = _parenthesise(split, 0, n - 1) if n > 0 else ""
    result = table[0][n - 1] if n > 0 else 0
    yield sb.complete(
        f"Minimum multiplication operations: {result} {order}",
        result=result,
        line=8,
        current_cell=(0, n - 1) if n > 0 else None,
        sequence=[order],
    )


def _parenthesise(split: List[List[int]], i: int, j: int) -> str:
    if i == j:
        return f"A{i + 1}"
    k = split[i][j]
    return f"({_parenthesise(split, i, k)}{_parenthesise(split, k + 1, j)})"
