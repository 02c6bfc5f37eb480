"""
heap_sort.py — Heap Sort
========================
Builds a max-heap in place (sift-down from floor(n/2)-1 to 0), then
repeatedly swaps the root with the last unsorted element and restores
the heap over the shrinking prefix.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                            # 0
    "    for i in n//2-1 down to 0:",                 # 1
    "        sift_down(arr, n, i)",                   # 2
    "    for end in n-1 down to 1:",                  # 3
    "        swap(arr[0], arr[end])",                 # 4
    "        sift_down(arr, end, 0)",                 # 5
    "def sift_down(arr, size, i):",                   # 6
    "    largest ← max(i, left(i), right(i))",        # 7
    "    if largest != i:",                           # 8
    "        swap(arr[i], arr[largest]); repeat",     # 9
]


def heap_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)

    yield sb.build("build-heap", "Building max heap from array", line=1)
    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(arr, sb, n, i)
    yield sb.build("heap-built", "Max heap constructed", line=3)

    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        sb.mark_sorted(end)
        yield sb.build(
            "swap",
            f"Moving max element {arr[end]} to its final position {end}",
            line=4,
            swapping=(0, end),
        )
        yield from _sift_down(arr, sb, end, 0)

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=0)


def _sift_down(arr: List[float], sb: SortStepBuilder, size: int, i: int) -> Generator[Step, None, None]:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2

        if left < size:
            yield sb.build(
                "compare",
                f"Comparing parent {arr[largest]} with left child {arr[left]}",
                line=7,
                comparing=(largest, left),
            )
            if arr[left] > arr[largest]:
                largest = left
        if right < size:
            yield sb.build(
                "compare",
                f"Comparing {arr[largest]} with right child {arr[right]}",
                line=7,
                comparing=(largest, right),
            )
            if arr[right] > arr[largest]:
                largest = right

        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        yield sb.build(
            "swap",
            f"Swapping {arr[i]} and {arr[largest]} to maintain heap property",
            line=9,
            swapping=(i, largest),
        )
        i = largest
