"""
fibonacci_search.py — Fibonacci Search
======================================
Divides the range at Fibonacci offsets instead of halves.  Starts from
the smallest Fibonacci number >= n, probes offset + F(m-2), and steps
the Fibonacci triple down after each probe.  Requires sorted input.
"""

from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def fibonacci_search(arr, target):",             # 0
    "    fib_m ← smallest Fibonacci >= n",            # 1
    "    offset ← -1",                                # 2
    "    while fib_m > 1:",                           # 3
    "        i ← min(offset + fib_m2, n - 1)",        # 4
    "        if arr[i] < target: step down once, offset ← i",  # 5
    "        elif arr[i] > target: step down twice",  # 6
    "        else: return i",                         # 7
    "    if fib_m1 and arr[offset+1] == target: return offset+1",  # 8
    "    return -1",                                  # 9
]


def fibonacci_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SearchStepBuilder(arr, target)

    yield sb.build("start", f"Searching for {target} using Fibonacci Search", line=0)
    if n == 0:
        yield from sb.not_found("The array is empty", line=9)
        return

    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < n:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1
    yield sb.build(
        "fibonacci-init",
        f"Initialized Fibonacci numbers: fibM={fib_m}, fibM1={fib_m1}, fibM2={fib_m2}",
        line=1,
    )

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, n - 1)
        yield sb.build(
            "check",
            f"Checking index {i}, value: {arr[i]}",
            line=4,
            current_index=i,
            comparing=(i,),
            highlighted=(i,),
        )
        if arr[i] < target:
            fib_m, fib_m1 = fib_m1, fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
            yield sb.build("move-right", f"{arr[i]} < {target}, eliminating left portion", line=5)
        elif arr[i] > target:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
            yield sb.build("move-left", f"{arr[i]} > {target}, eliminating right portion", line=6)
        else:
            yield from sb.found(i, line=7)
            return

    last = offset + 1
    if fib_m1 and last < n:
        yield sb.build(
            "check",
            f"Checking last candidate at index {last}, value: {arr[last]}",
            line=8,
            current_index=last,
            comparing=(last,),
        )
        if arr[last] == target:
            yield from sb.found(last, line=8)
            return

    yield from sb.not_found(line=9)
