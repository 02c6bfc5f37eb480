"""
palindrome_partitioning.py — Palindrome Partitioning (min cuts)
===============================================================
Two passes.  First the palindrome table: every substring text[i..j] of
length >= 2 is checked by comparing its ends and the inner cell.  Then
cuts[i], the fewest cuts for text[0..i], is filled left to right.  The
step table switches from the palindrome matrix to the cut row between
the passes.
"""

import math
from typing import Generator, List, Optional

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def palindrome_partitioning(s):",                # 0
    "    P[i][i] ← true",                             # 1
    "    for length in 2 .. n, for each i:",          # 2
    "        P[i][j] ← s[i] == s[j] and (length == 2 or P[i+1][j-1])",  # 3
    "    for i in 0 .. n-1:",                         # 4
    "        if P[0][i]: cuts[i] ← 0",                # 5
    "        else: cuts[i] ← min(cuts[j] + 1 for P[j+1][i])",  # 6
    "    return cuts[n-1]",                           # 7
]


def palindrome_partitioning(text: str) -> Generator[Step, None, None]:
    n = len(text)
    is_pal = [[i == j for j in range(n)] for i in range(n)]
    sb = DPStepBuilder(is_pal)

    yield sb.build("start", f'Finding minimum cuts for palindrome partitioning of "{text}"', line=1)

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            is_pal[i][j] = text[i] == text[j] and (length == 2 or is_pal[i + 1][j - 1])
            yield sb.build(
                "palindrome-check",
                f'"{text[i:j + 1]}" is {"" if is_pal[i][j] else "not "}a palindrome',
                line=3,
                current_cell=(i, j),
                highlighted_cells=[(i + 1, j - 1)] if length > 2 else [],
            )

    cuts: List[Optional[int]] = [None] * n
    prev_cut: List[int] = [-1] * n
    sb.table = cuts

    for i in range(n):
        if is_pal[0][i]:
            cuts[i] = 0
            yield sb.build(
                "palindrome",
                f'"{text[:i + 1]}" is palindrome, 0 cuts needed',
                line=5,
                current_cell=(0, i),
            )
            continue

        best = math.inf
        for j in range(i):
            if is_pal[j + 1][i] and cuts[j] + 1 < best:
                best = cuts[j] + 1
                prev_cut[i] = j
        cuts[i] = int(best)
        yield sb.build(
            "partition",
            f'Minimum cuts for "{text[:i + 1]}": {cuts[i]}',
            line=6,
            current_cell=(0, i),
            highlighted_cells=[(0, prev_cut[i])],
        )

    pieces: List[str] = []
    end = n - 1
    while end >= 0:
        start = prev_cut[end] + 1
        pieces.append(text[start:end + 1])
        end = prev_cut[end]
    pieces.reverse()

    result = cuts[n - 1] if n else 0
    yield sb.complete(
        f"Minimum cuts needed: {result}",
        result=result,
        line=7,
        sequence=pieces,
    )
