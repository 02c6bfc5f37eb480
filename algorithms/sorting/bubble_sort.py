"""
bubble_sort.py — Bubble Sort
============================
Repeatedly walks the unsorted prefix, swapping adjacent out-of-order
pairs.  After pass i the largest remaining value has bubbled to index
n-1-i and is marked sorted.  A pass without a swap ends the run early.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                          # 0
    "    for i in 0 .. n-2:",                         # 1
    "        swapped ← false",                        # 2
    "        for j in 0 .. n-i-2:",                   # 3
    "            if arr[j] > arr[j+1]:",              # 4
    "                swap(arr[j], arr[j+1])",         # 5
    "                swapped ← true",                 # 6
    "        mark arr[n-i-1] sorted",                 # 7
    "        if not swapped: break",                  # 8
    "    return arr",                                 # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            yield sb.build(
                "compare",
                f"Comparing elements at indices {j} and {j + 1}: {arr[j]} and {arr[j + 1]}",
                line=4,
                comparing=(j, j + 1),
            )
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield sb.build(
                    "swap",
                    f"Swapping {arr[j + 1]} and {arr[j]}",
                    line=5,
                    swapping=(j, j + 1),
                )

        sb.mark_sorted(n - i - 1)
        yield sb.build(
            "sorted",
            f"Element at index {n - i - 1} is now in its final position",
            line=7,
        )
        if not swapped:
            break

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=9)
