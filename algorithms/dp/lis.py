"""
lis.py — Longest Increasing Subsequence
=======================================
O(n²) formulation: dp[i] is the length of the longest strictly
increasing subsequence ending at index i.  Improving extensions are
reported as `candidate` steps before dp[i] is written once.
"""

from typing import Generator, List, Optional

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def lis(arr):",                                  # 0
    "    for i in 0 .. n-1:",                         # 1
    "        best ← 1",                               # 2
    "        for j in 0 .. i-1:",                     # 3
    "            if arr[j] < arr[i] and dp[j] + 1 > best:",  # 4
    "                best ← dp[j] + 1; prev[i] ← j",  # 5
    "        dp[i] ← best",                           # 6
    "    return max(dp)",                             # 7
]


def longest_increasing_subsequence(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n = len(arr)
    table: List[Optional[int]] = [None] * n
    prev: List[int] = [-1] * n
    sb = DPStepBuilder(table)

    yield sb.build("start", f"Finding longest increasing subsequence in {arr}", line=0)

    for i in range(n):
        best = 1
        for j in range(i):
            if arr[j] < arr[i] and table[j] + 1 > best:
                best = table[j] + 1
                prev[i] = j
                yield sb.build(
                    "candidate",
                    f"LIS ending at {i}({arr[i]}): extend from {j}({arr[j]}), length = {best}",
                    line=5,
                    current_cell=(0, i),
                    highlighted_cells=[(0, j)],
                    candidate=best,
                )
        table[i] = best
        yield sb.build("fill", f"dp[{i}] = {best}", line=6, current_cell=(0, i))

    if n == 0:
        yield sb.complete("Longest increasing subsequence length: 0", result=0, line=7)
        return

    end = max(range(n), key=lambda k: table[k])
    sequence: List[float] = []
    k = end
    while k != -1:
        sequence.append(arr[k])
        k = prev[k]
    sequence.reverse()

    yield sb.complete(
        f"Longest increasing subsequence length: {table[end]}",
        result=table[end],
        line=7,
        current_cell=(0, end),
        sequence=sequence,
    )
