"""
cocktail_sort.py — Cocktail Shaker Sort
=======================================
Bidirectional bubble sort.  A forward pass pushes the largest value to
the right end of the window, a backward pass pushes the smallest to the
left end; both ends are marked sorted as the window shrinks.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def cocktail_sort(arr):",                        # 0
    "    start ← 0; end ← n-1; swapped ← true",      # 1
    "    while swapped:",                             # 2
    "        swapped ← false",                        # 3
    "        for i in start .. end-1:",               # 4
    "            if arr[i] > arr[i+1]: swap",         # 5
    "        if not swapped: break",                  # 6
    "        end ← end - 1  (arr[end] sorted)",       # 7
    "        swapped ← false",                        # 8
    "        for i in end-1 down to start:",          # 9
    "            if arr[i] > arr[i+1]: swap",         # 10
    "        start ← start + 1  (arr[start] sorted)", # 11
    "    return arr",                                 # 12
]


def cocktail_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr   = list(numbers)
    sb    = SortStepBuilder(arr)
    start = 0
    end   = len(arr) - 1
    swapped = True

    while swapped and start < end:
        # -- forward pass --
        swapped = False
        for i in range(start, end):
            yield sb.build(
                "compare",
                f"Forward pass: comparing {arr[i]} and {arr[i + 1]}",
                line=5,
                comparing=(i, i + 1),
                segment=(start, end),
            )
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
                yield sb.build(
                    "swap",
                    f"Swapping {arr[i + 1]} and {arr[i]}",
                    line=5,
                    swapping=(i, i + 1),
                    segment=(start, end),
                )

        if not swapped:
            break

        sb.mark_sorted(end)
        yield sb.build("sorted", f"Element at index {end} is now in its final position", line=7)
        end -= 1

        # -- backward pass --
        swapped = False
        for i in range(end - 1, start - 1, -1):
            yield sb.build(
                "compare",
                f"Backward pass: comparing {arr[i]} and {arr[i + 1]}",
                line=10,
                comparing=(i, i + 1),
                segment=(start, end),
            )
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
                yield sb.build(
                    "swap",
                    f"Swapping {arr[i + 1]} and {arr[i]}",
                    line=10,
                    swapping=(i, i + 1),
                    segment=(start, end),
                )

        sb.mark_sorted(start)
        yield sb.build("sorted", f"Element at index {start} is now in its final position", line=11)
        start += 1

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=12)
