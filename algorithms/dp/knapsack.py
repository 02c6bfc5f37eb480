"""
knapsack.py — 0/1 Knapsack
==========================
dp[i][w] is the best value using the first i items within capacity w:

    dp[i][w] = max(dp[i-1][w], values[i-1] + dp[i-1][w - weights[i-1]])

The chosen items are recovered by walking back from dp[n][capacity]:
an item was taken exactly when its row changed the value.
"""

from typing import Generator, List

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def knapsack(weights, values, W):",              # 0
    "    dp ← (n+1) × (W+1) zeros",                   # 1
    "    for i in 1 .. n:",                           # 2
    "        for w in 0 .. W:",                       # 3
    "            if weights[i-1] <= w:",              # 4
    "                dp[i][w] ← max(exclude, include)",  # 5
    "            else: dp[i][w] ← dp[i-1][w]",        # 6
    "    backtrack from dp[n][W]",                    # 7
    "    return dp[n][W]",                            # 8
]


def knapsack(weights: List[int], values: List[float], capacity: int) -> Generator[Step, None, None]:
    n = len(weights)
    table = [[0] * (capacity + 1) for _ in range(n + 1)]
    sb = DPStepBuilder(table)

    yield sb.build(
        "start",
        f"Solving 0/1 knapsack: {n} items, capacity {capacity}",
        line=1,
    )

    for i in range(1, n + 1):
        wt, val = weights[i - 1], values[i - 1]
        for w in range(capacity + 1):
            exclude = table[i - 1][w]
            if wt <= w:
                include = val + table[i - 1][w - wt]
                table[i][w] = max(include, exclude)
                yield sb.build(
                    "compare",
                    f"Item {i} (w={wt}, v={val}), capacity {w}: "
                    f"include = {include}, exclude = {exclude} → {table[i][w]}",
                    line=5,
                    current_cell=(i, w),
                    highlighted_cells=[(i - 1, w), (i - 1, w - wt)],
                )
            else:
                table[i][w] = exclude
                yield sb.build(
                    "skip",
                    f"Item {i} (w={wt}) too heavy for capacity {w}, keeping {exclude}",
                    line=6,
                    current_cell=(i, w),
                    highlighted_cells=[(i - 1, w)],
                )

    chosen: List[int] = []
    w = capacity
    for i in range(n, 0, -1):
        if table[i][w] != table[i - 1][w]:
            chosen.append(i - 1)
            yield sb.build(
                "backtrack",
                f"Item {i} was taken (value changed from {table[i - 1][w]} to {table[i][w]})",
                line=7,
                current_cell=(i, w),
                sequence=sorted(chosen),
            )
            w -= weights[i - 1]

    best = table[n][capacity]
    yield sb.complete(
        f"Maximum value: {best}",
        result=best,
        line=8,
        current_cell=(n, capacity),
        sequence=sorted(chosen),
    )
