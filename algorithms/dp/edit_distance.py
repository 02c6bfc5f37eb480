"""
edit_distance.py — Levenshtein Edit Distance
============================================
Unit-cost insert / delete / replace.  The first row and column hold the
distance to the empty string.  When several operations tie for the
minimum the reported one follows replace > insert > delete, and the
walk back that recovers the edit script uses the same order.
"""

from typing import Generator, List

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def edit_distance(a, b):",                       # 0
    "    dp[i][0] ← i; dp[0][j] ← j",                 # 1
    "    for i in 1 .. m:",                           # 2
    "        for j in 1 .. n:",                       # 3
    "            if a[i-1] == b[j-1]: dp[i][j] ← dp[i-1][j-1]",  # 4
    "            else: dp[i][j] ← 1 + min(replace, insert, delete)",  # 5
    "    backtrack from dp[m][n]",                    # 6
    "    return dp[m][n]",                            # 7
]


def edit_distance(a: str, b: str) -> Generator[Step, None, None]:
    m, n = len(a), len(b)
    table = [[None] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(1, n + 1):
        table[0][j] = j
    sb = DPStepBuilder(table)

    yield sb.build("start", f'Computing edit distance from "{a}" to "{b}"', line=1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
                yield sb.build(
                    "match",
                    f"'{a[i - 1]}' matches, no edit needed: dp[{i}][{j}] = {table[i][j]}",
                    line=4,
                    current_cell=(i, j),
                    highlighted_cells=[(i - 1, j - 1)],
                )
                continue

            replace = table[i - 1][j - 1]
            insert  = table[i][j - 1]
            delete  = table[i - 1][j]
            best = min(replace, insert, delete)
            if replace == best:
                op, source = "replace", (i - 1, j - 1)
            elif insert == best:
                op, source = "insert", (i, j - 1)
            else:
                op, source = "delete", (i - 1, j)
            table[i][j] = best + 1
            yield sb.build(
                "edit",
                f"'{a[i - 1]}' vs '{b[j - 1]}': {op} → dp[{i}][{j}] = 1 + {best} = {table[i][j]}",
                line=5,
                current_cell=(i, j),
                highlighted_cells=[source],
                operation=op,
            )

    script: List[str] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1] and table[i][j] == table[i - 1][j - 1]:
            i, j = i - 1, j - 1
            continue
        if i > 0 and j > 0 and table[i][j] == table[i - 1][j - 1] + 1:
            op = f"replace '{a[i - 1]}' with '{b[j - 1]}'"
            cell, i, j = (i, j), i - 1, j - 1
        elif j > 0 and table[i][j] == table[i][j - 1] + 1:
            op = f"insert '{b[j - 1]}'"
            cell, j = (i, j), j - 1
        else:
            op = f"delete '{a[i - 1]}'"
            cell, i = (i, j), i - 1
        script.append(op)
        yield sb.build(
            "backtrack",
            f"Edit: {op}",
            line=6,
            current_cell=cell,
            sequence=list(reversed(script)),
            operation=op.split(" ", 1)[0],
        )

    yield sb.complete(
        f"Edit distance: {table[m][n]}",
        result=table[m][n],
        line=7,
        current_cell=(m, n),
        sequence=list(reversed(script)),
    )
