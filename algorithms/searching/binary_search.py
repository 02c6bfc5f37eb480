"""
binary_search.py — Binary Search
================================
Halves the candidate range [left, right] around mid = (left+right)//2
until the target is hit or the range is empty.  Requires sorted input.

`search_range` is the bounded core, reused by exponential search once
it has located the range that can contain the target.  Its steps point
at lines 3..7 below, shifted by `line_offset` for a caller whose
pseudocode places the same loop further down.
"""

from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",                # 0
    "    left ← 0; right ← n - 1",                    # 1
    "    while left <= right:",                       # 2
    "        mid ← (left + right) // 2",              # 3
    "        if arr[mid] == target: return mid",      # 4
    "        if arr[mid] < target: left ← mid + 1",   # 5
    "        else: right ← mid - 1",                  # 6
    "    return -1",                                  # 7
]


def binary_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SearchStepBuilder(arr, target)

    yield sb.build("start", f"Searching for {target} using Binary Search", line=1, bounds=(0, len(arr) - 1))
    yield from search_range(sb, 0, len(arr) - 1, compare_type="compare")


def search_range(
    sb: SearchStepBuilder,
    left: int,
    right: int,
    compare_type: str = "compare",
    line_offset: int = 0,
) -> Generator[Step, None, None]:
    arr, target = sb.array, sb.target

    while left <= right:
        mid = (left + right) // 2
        yield sb.build(
            "calculate-mid",
            f"Range [{left}, {right}]: middle index is {mid}",
            line=3 + line_offset,
            current_index=mid,
            bounds=(left, right),
            highlighted=(left, mid, right),
        )
        yield sb.build(
            compare_type,
            f"Comparing arr[{mid}] = {arr[mid]} with target {target}",
            line=4 + line_offset,
            current_index=mid,
            comparing=(mid,),
            bounds=(left, right),
        )

        if arr[mid] == target:
            yield from sb.found(mid, line=4 + line_offset)
            return
        if arr[mid] < target:
            left = mid + 1
            yield sb.build(
                "move-right",
                f"{arr[mid]} < {target}, searching right half [{left}, {right}]",
                line=5 + line_offset,
                bounds=(left, right),
            )
        else:
            right = mid - 1
            yield sb.build(
                "move-left",
                f"{arr[mid]} > {target}, searching left half [{left}, {right}]",
                line=6 + line_offset,
                bounds=(left, right),
            )

    yield from sb.not_found(line=7 + line_offset)
