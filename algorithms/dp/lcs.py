"""
lcs.py — Longest Common Subsequence
===================================
Classic (m+1) × (n+1) table.  A character match extends the diagonal;
otherwise the cell takes the larger of up / left.  The walk back prefers
the diagonal on a match, then the larger neighbour, with ties going left.
"""

from typing import Generator, List

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def lcs(a, b):",                                 # 0
    "    dp ← (m+1) × (n+1) zeros",                   # 1
    "    for i in 1 .. m:",                           # 2
    "        for j in 1 .. n:",                       # 3
    "            if a[i-1] == b[j-1]: dp[i][j] ← dp[i-1][j-1] + 1",  # 4
    "            else: dp[i][j] ← max(dp[i-1][j], dp[i][j-1])",     # 5
    "    backtrack from dp[m][n]",                    # 6
    "    return dp[m][n]",                            # 7
]


def longest_common_subsequence(a: str, b: str) -> Generator[Step, None, None]:
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    sb = DPStepBuilder(table)

    yield sb.build("start", f'Finding longest common subsequence of "{a}" and "{b}"', line=1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
                yield sb.build(
                    "match",
                    f"'{a[i - 1]}' matches: dp[{i}][{j}] = dp[{i - 1}][{j - 1}] + 1 = {table[i][j]}",
                    line=4,
                    current_cell=(i, j),
                    highlighted_cells=[(i - 1, j - 1)],
                )
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
                yield sb.build(
                    "no-match",
                    f"'{a[i - 1]}' != '{b[j - 1]}': dp[{i}][{j}] = max({table[i - 1][j]}, {table[i][j - 1]}) = {table[i][j]}",
                    line=5,
                    current_cell=(i, j),
                    highlighted_cells=[(i - 1, j), (i, j - 1)],
                )

    chars: List[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            yield sb.build(
                "backtrack",
                f"'{a[i - 1]}' is part of the LCS",
                line=6,
                current_cell=(i, j),
                sequence=list(reversed(chars)),
            )
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    lcs = "".join(reversed(chars))
    yield sb.complete(
        f'LCS length: {table[m][n]} ("{lcs}")',
        result=table[m][n],
        line=7,
        current_cell=(m, n),
        sequence=list(lcs),
    )
