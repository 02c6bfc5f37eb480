"""
comb_sort.py — Comb Sort
========================
Bubble sort over a shrinking gap.  The gap starts at n and is divided by
1.3 (floored, never below 1) before each pass; the run stops once a
gap-1 pass performs no swap.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


SHRINK_FACTOR = 1.3

PSEUDOCODE: List[str] = [
    "def comb_sort(arr):",                            # 0
    "    gap ← n; sorted ← false",                    # 1
    "    while not sorted:",                          # 2
    "        gap ← max(1, floor(gap / 1.3))",         # 3
    "        if gap == 1: sorted ← true",             # 4
    "        for i in 0 .. n-gap-1:",                 # 5
    "            if arr[i] > arr[i+gap]:",            # 6
    "                swap(arr[i], arr[i+gap])",       # 7
    "                sorted ← false",                 # 8
    "    return arr",                                 # 9
]


def comb_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)
    gap = n
    done = n < 2

    while not done:
        gap = max(1, int(gap / SHRINK_FACTOR))
        done = gap == 1
        yield sb.build("gap-start", f"Starting pass with gap {gap}", line=3, gap=gap)

        for i in range(n - gap):
            yield sb.build(
                "compare",
                f"Comparing {arr[i]} (index {i}) and {arr[i + gap]} (index {i + gap})",
                line=6,
                comparing=(i, i + gap),
                gap=gap,
            )
            if arr[i] > arr[i + gap]:
                arr[i], arr[i + gap] = arr[i + gap], arr[i]
                done = False
                yield sb.build(
                    "swap",
                    f"Swapping {arr[i + gap]} and {arr[i]}",
                    line=7,
                    swapping=(i, i + gap),
                    gap=gap,
                )

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=9)
