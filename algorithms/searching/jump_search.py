"""
jump_search.py — Jump Search
============================
Jumps ahead in blocks of floor(sqrt(n)) until a block end is not smaller
than the target, then scans that block linearly.  Requires sorted input.
"""

import math
from typing import Generator, List

from algorithms.step import SearchStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def jump_search(arr, target):",                  # 0
    "    step ← floor(sqrt(n)); prev ← 0",            # 1
    "    while arr[min(step, n) - 1] < target:",      # 2
    "        prev ← step; step ← step + jump",        # 3
    "        if prev >= n: return -1",                # 4
    "    for i in prev .. min(step, n) - 1:",         # 5
    "        if arr[i] == target: return i",          # 6
    "        if arr[i] > target: break",              # 7
    "    return -1",                                  # 8
]


def jump_search(numbers: List[float], target: float) -> Generator[Step, None, None]:
    arr  = list(numbers)
    n    = len(arr)
    sb   = SearchStepBuilder(arr, target)
    jump = int(math.sqrt(n))

    yield sb.build(
        "start",
        f"Searching for {target} using Jump Search (jump size: {jump})",
        line=1,
        jump_size=jump,
    )
    if n == 0:
        yield from sb.not_found("The array is empty", line=8)
        return

    step, prev = jump, 0
    while arr[min(step, n) - 1] < target:
        probe = min(step, n) - 1
        yield sb.build(
            "jump",
            f"Jumping to index {probe}, value: {arr[probe]}",
            line=3,
            current_index=probe,
            jump_size=jump,
            block=(prev, probe),
            highlighted=(probe,),
        )
        prev = step
        step += jump
        if prev >= n:
            yield from sb.not_found(f"Target {target} not found - exceeded array bounds", line=4)
            return

    block_end = min(step, n) - 1
    yield sb.build(
        "block-found",
        f"Target might be in block [{prev}, {block_end}], performing linear search",
        line=5,
        jump_size=jump,
        block=(prev, block_end),
    )

    for i in range(prev, block_end + 1):
        yield sb.build(
            "linear-search",
            f"Checking element at index {i}: {arr[i]}",
            line=6,
            current_index=i,
            comparing=(i,),
            block=(prev, block_end),
        )
        if arr[i] == target:
            yield from sb.found(i, line=6)
            return
        if arr[i] > target:
            break

    yield from sb.not_found(line=8)
