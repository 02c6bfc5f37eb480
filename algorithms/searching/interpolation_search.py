"""
interpolation_search.py — Interpolation Search
==============================================
Estimates the target's position from the values at the range ends:

    pos = left + (target - arr[left]) * (right - left) // (arr[right] - arr[left])

Continues while left <= right and the target lies inside
[arr[left], arr[right]].  When both ends hold the same value the probe
is `left` instead of dividing by zero.  Requires sorted input.
"""

from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def interpolation_search(arr, target):",         # 0
    "    left ← 0; right ← n - 1",                    # 1
    "    while left <= right and arr[left] <= target <= arr[right]:",  # 2
    "        if left == right: return left if arr[left] == target",    # 3
    "        pos ← interpolate(left, right, target)", # 4
    "        if arr[pos] == target: return pos",      # 5
    "        if arr[pos] < target: left ← pos + 1",   # 6
    "        else: right ← pos - 1",                  # 7
    "    return -1",                                  # 8
]


def interpolation_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SearchStepBuilder(arr, target)
    left, right = 0, len(arr) - 1

    yield sb.build("start", f"Searching for {target} using Interpolation Search", line=1, bounds=(left, right))

    while left <= right and arr[left] <= target <= arr[right]:
        if left == right:
            yield sb.build(
                "single-element",
                f"Only one element left at index {left}: {arr[left]}",
                line=3,
                current_index=left,
                comparing=(left,),
            )
            if arr[left] == target:
                yield from sb.found(left, line=3)
                return
            break

        span = arr[right] - arr[left]
        if span == 0:
            pos = left
        else:
            pos = left + int((target - arr[left]) * (right - left) // span)
        yield sb.build(
            "interpolate",
            f"Estimated position {pos} from range [{left}, {right}]",
            line=4,
            current_index=pos,
            bounds=(left, right),
            highlighted=(left, pos, right),
        )
        yield sb.build(
            "compare",
            f"Comparing arr[{pos}] = {arr[pos]} with target {target}",
            line=5,
            current_index=pos,
            comparing=(pos,),
            bounds=(left, right),
        )

        if arr[pos] == target:
            yield from sb.found(pos, line=5)
            return
        if arr[pos] < target:
            left = pos + 1
            yield sb.build("move-right", f"{arr[pos]} < {target}, searching [{left}, {right}]", line=6, bounds=(left, right))
        else:
            right = pos - 1
            yield sb.build("move-left", f"{arr[pos]} > {target}, searching [{left}, {right}]", line=7, bounds=(left, right))

    yield from sb.not_found(line=8)
