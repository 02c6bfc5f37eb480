"""
ternary_search.py — Ternary Search
==================================
Splits [left, right] into thirds at

    mid1 = left + (right - left) // 3
    mid2 = right - (right - left) // 3

and keeps the third that can still contain the target.  Requires sorted
input.
"""

from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def ternary_search(arr, target):",               # 0
    "    left ← 0; right ← n - 1",                    # 1
    "    while left <= right:",                       # 2
    "        mid1, mid2 ← thirds(left, right)",       # 3
    "        if arr[mid1] == target: return mid1",    # 4
    "        if arr[mid2] == target: return mid2",    # 5
    "        if target < arr[mid1]: right ← mid1 - 1",  # 6
    "        elif target > arr[mid2]: left ← mid2 + 1", # 7
    "        else: left ← mid1 + 1; right ← mid2 - 1",  # 8
    "    return -1",                                  # 9
]


def ternary_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SearchStepBuilder(arr, target)
    left, right = 0, len(arr) - 1

    yield sb.build("start", f"Searching for {target} using Ternary Search", line=1, bounds=(left, right))

    while left <= right:
        third = (right - left) // 3
        mid1, mid2 = left + third, right - third
        yield sb.build(
            "calculate-mids",
            f"Range [{left}, {right}]: mid1 = {mid1}, mid2 = {mid2}",
            line=3,
            bounds=(left, right),
            highlighted=(mid1, mid2),
        )
        yield sb.build(
            "compare",
            f"Comparing arr[{mid1}] = {arr[mid1]} and arr[{mid2}] = {arr[mid2]} with target {target}",
            line=4,
            comparing=(mid1, mid2),
            bounds=(left, right),
        )

        if arr[mid1] == target:
            yield from sb.found(mid1, line=4)
            return
        if arr[mid2] == target:
            yield from sb.found(mid2, line=5)
            return

        if target < arr[mid1]:
            right = mid1 - 1
            yield sb.build("search-left", f"{target} < {arr[mid1]}, searching left third", line=6, bounds=(left, right))
        elif target > arr[mid2]:
            left = mid2 + 1
            yield sb.build("search-right", f"{target} > {arr[mid2]}, searching right third", line=7, bounds=(left, right))
        else:
            left, right = mid1 + 1, mid2 - 1
            yield sb.build("search-middle", f"{target} lies between the mids, searching middle third", line=8, bounds=(left, right))

    yield from sb.not_found(line=9)
