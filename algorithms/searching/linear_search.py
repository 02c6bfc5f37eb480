"""
linear_search.py — Linear Search
================================
Left-to-right scan; stops at the first element equal to the target.
Works on unsorted input.
"""

from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",                # 0
    "    for i in 0 .. n-1:",                         # 1
    "        if arr[i] == target: return i",          # 2
    "    return -1",                                  # 3
]


def linear_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SearchStepBuilder(arr, target)

    yield sb.build("start", f"Searching for {target} using Linear Search", line=0)
    for i, value in enumerate(arr):
        yield sb.build(
            "compare",
            f"Checking element at index {i}: {value}",
            line=2,
            current_index=i,
            comparing=(i,),
        )
        if value == target:
            yield from sb.found(i, line=2)
            return

    yield from sb.not_found(line=3)
