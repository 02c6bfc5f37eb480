"""
selection_sort.py — Selection Sort
==================================
Finds the minimum of the unsorted suffix and swaps it into the first
unsorted position.  The swap is skipped when the minimum is already
there.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                       # 0
    "    for i in 0 .. n-2:",                         # 1
    "        min ← i",                                # 2
    "        for j in i+1 .. n-1:",                   # 3
    "            if arr[j] < arr[min]: min ← j",      # 4
    "        if min != i: swap(arr[i], arr[min])",    # 5
    "        mark arr[i] sorted",                     # 6
    "    return arr",                                 # 7
]


def selection_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)

    for i in range(n - 1):
        min_idx = i
        yield sb.build("find-min", f"Looking for the minimum from index {i}", line=2, highlighted=(i,))

        for j in range(i + 1, n):
            yield sb.build(
                "compare",
                f"Comparing {arr[j]} with current minimum {arr[min_idx]}",
                line=4,
                comparing=(min_idx, j),
            )
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield sb.build("new-min", f"New minimum found: {arr[j]} at index {j}", line=4, highlighted=(j,))

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield sb.build(
                "swap",
                f"Swapping {arr[min_idx]} and {arr[i]}",
                line=5,
                swapping=(i, min_idx),
            )

        sb.mark_sorted(i)
        yield sb.build("sorted", f"Element at index {i} is now in its final position", line=6)

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=7)
