"""
exponential_search.py — Exponential Search
==========================================
Checks index 0, then doubles a bound while arr[bound] < target.  The
target, if present, lies in [bound // 2, min(bound, n - 1)], which is
finished off with binary search.  Requires sorted input.
"""

from typing import Generator, List

from algorithms.searching.binary_search import search_range
from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def exponential_search(arr, target):",           # 0
    "    if arr[0] == target: return 0",              # 1
    "    bound ← 1",                                  # 2
    "    while bound < n and arr[bound] < target:",   # 3
    "        bound ← bound * 2",                      # 4
    "    left ← bound // 2; right ← min(bound, n-1)",  # 5
    "    while left <= right:",                       # 6
    "        mid ← (left + right) // 2",              # 7
    "        if arr[mid] == target: return mid",      # 8
    "        if arr[mid] < target: left ← mid + 1",   # 9
    "        else: right ← mid - 1",                  # 10
    "    return -1",                                  # 11
]


def exponential_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SearchStepBuilder(arr, target)

    yield sb.build("start", f"Searching for {target} using Exponential Search", line=0)
    if n == 0:
        yield from sb.not_found("The array is empty", line=1)
        return

    yield sb.build(
        "compare",
        f"Checking first element: {arr[0]}",
        line=1,
        current_index=0,
        comparing=(0,),
    )
    if arr[0] == target:
        yield from sb.found(0, line=1)
        return

    bound = 1
    while bound < n and arr[bound] < target:
        yield sb.build(
            "expand",
            f"Checking bound at index {bound}, value: {arr[bound]}",
            line=4,
            current_index=bound,
            highlighted=(bound,),
        )
        bound *= 2

    left, right = bound // 2, min(bound, n - 1)
    yield sb.build(
        "range-found",
        f"Target might be in range [{left}, {right}], performing binary search",
        line=5,
        bounds=(left, right),
    )
    yield from search_range(sb, left, right, compare_type="binary-compare", line_offset=4)
