"""
fibonacci.py — Fibonacci (bottom-up)
====================================
Fills F[0..n] left to right from F[0] = 0, F[1] = 1.
"""

from typing import Generator, List, Optional

from algorithms.step import DPStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def fibonacci(n):",                              # 0
    "    F[0] ← 0; F[1] ← 1",                         # 1
    "    for i in 2 .. n:",                           # 2
    "        F[i] ← F[i-1] + F[i-2]",                 # 3
    "    return F[n]",                                # 4
]


def fibonacci(n: int) -> Generator[Step, None, None]:
    table: List[Optional[int]] = [None] * (n + 1)
    sb = DPStepBuilder(table)

    table[0] = 0
    if n >= 1:
        table[1] = 1
    yield sb.build("start", f"Computing Fibonacci({n}) with base cases F(0) = 0, F(1) = 1", line=1)

    for i in range(2, n + 1):
        table[i] = table[i - 1] + table[i - 2]
        yield sb.build(
            "compute",
            f"F({i}) = F({i - 1}) + F({i - 2}) = {table[i - 1]} + {table[i - 2]} = {table[i]}",
            line=3,
            current_cell=(0, i),
            highlighted_cells=[(0, i - 1), (0, i - 2)],
        )

    yield sb.complete(f"Fibonacci({n}) = {table[n]}", result=table[n], line=4)
