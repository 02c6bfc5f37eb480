"""
subset_sum.py — Subset Sum
==========================
dp[i][s] is True when some subset of the first i numbers sums to s.
Column 0 is True in every row; an element larger than s is skipped,
otherwise the cell is `decide`d from the exclude / include cells above.
"""

from typing import Generator, List

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def subset_sum(arr, target):",                   # 0
    "    dp[i][0] ← true for all i",                  # 1
    "    for i in 1 .. n:",                           # 2
    "        for s in 1 .. target:",                  # 3
    "            if arr[i-1] <= s:",                  # 4
    "                dp[i][s] ← dp[i-1][s] or dp[i-1][s-arr[i-1]]",  # 5
    "            else: dp[i][s] ← dp[i-1][s]",        # 6
    "    return dp[n][target]",                       # 7
]


def subset_sum(numbers: List[int], target: int) -> Generator[Step, None, None]:
    arr = list(numbers)
    n = len(arr)
    table = [[s == 0 for s in range(target + 1)] for _ in range(n + 1)]
    sb = DPStepBuilder(table)

    yield sb.build("start", f"Finding if subset with sum {target} exists in {arr}", line=1)

    for i in range(1, n + 1):
        x = arr[i - 1]
        for s in range(1, target + 1):
            if x <= s:
                table[i][s] = table[i - 1][s] or table[i - 1][s - x]
                yield sb.build(
                    "decide",
                    f"Element {x}, sum {s}: exclude={table[i - 1][s]}, "
                    f"include={table[i - 1][s - x]} → {table[i][s]}",
                    line=5,
                    current_cell=(i, s),
                    highlighted_cells=[(i - 1, s), (i - 1, s - x)],
                )
            else:
                table[i][s] = table[i - 1][s]
                yield sb.build(
                    "skip",
                    f"Element {x} > sum {s}, skip",
                    line=6,
                    current_cell=(i, s),
                    highlighted_cells=[(i - 1, s)],
                )

    exists = table[n][target]
    chosen: List[int] = []
    if exists:
        s = target
        for i in range(n, 0, -1):
            if s == 0:
                break
            if not table[i - 1][s]:
                chosen.append(i - 1)
                s -= arr[i - 1]
                yield sb.build(
                    "backtrack",
                    f"Element {arr[i - 1]} is part of the subset",
                    line=7,
                    current_cell=(i, s + arr[i - 1]),
                    sequence=sorted(chosen),
                )

    yield sb.complete(
        f"Subset with sum {target} exists!" if exists else f"No subset with sum {target} found",
        result=exists,
        line=7,
        current_cell=(n, target),
        sequence=sorted(chosen),
    )
