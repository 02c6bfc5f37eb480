"""
rod_cutting.py — Rod Cutting
============================
prices[j] is the price of a piece of length j+1.  dp[i] is the best
revenue for a rod of length i:

    dp[i] = max over j < min(i, len(prices)) of prices[j] + dp[i - j - 1]
"""

import math
from typing import Generator, List, Optional

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def rod_cutting(prices, length):",               # 0
    "    dp[0] ← 0",                                  # 1
    "    for i in 1 .. length:",                      # 2
    "        for j in 0 .. min(i, |prices|) - 1:",    # 3
    "            best ← max(best, prices[j] + dp[i-j-1])",  # 4
    "        dp[i] ← best",                           # 5
    "    return dp[length]",                          # 6
]


def rod_cutting(prices: List[float], length: int) -> Generator[Step, None, None]:
    table: List[Optional[float]] = [0] + [None] * length
    first_cut: List[int] = [0] * (length + 1)
    sb = DPStepBuilder(table)

    yield sb.build(
        "start",
        f"Solving rod cutting problem: length {length}, prices {list(prices)}",
        line=1,
    )

    for i in range(1, length + 1):
        best = -math.inf
        for j in range(min(i, len(prices))):
            value = prices[j] + table[i - j - 1]
            if value > best:
                best = value
                first_cut[i] = j + 1
                yield sb.build(
                    "candidate",
                    f"Length {i}: cut at {j + 1}, value = {prices[j]} + {table[i - j - 1]} = {value}",
                    line=4,
                    current_cell=(0, i),
                    highlighted_cells=[(0, i - j - 1)],
                    candidate=value,
                )
        if math.isinf(best):
            best = 0
        table[i] = best
        yield sb.build("fill", f"dp[{i}] = {best}", line=5, current_cell=(0, i))

    pieces: List[int] = []
    remaining = length
    while remaining > 0 and first_cut[remaining]:
        pieces.append(first_cut[remaining])
        remaining -= first_cut[remaining]

    yield sb.complete(
        f"Maximum profit for length {length}: {table[length]}",
        result=table[length],
        line=6,
        current_cell=(0, length),
        sequence=pieces,
    )
