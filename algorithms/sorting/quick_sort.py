"""
quick_sort.py — Quicksort
=========================
Lomuto partition around the last element of each range.  Values strictly
smaller than the pivot move left; the pivot is then swapped into its
final slot and marked sorted.

Ranges are processed from an explicit worklist in the same order the
recursive formulation would visit them: (low, p-1) before (p+1, high).
A single-element range is final as soon as it is popped.
"""

from typing import Generator, List, Tuple

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",               # 0
    "    if low < high:",                            # 1
    "        pivot ← arr[high]; i ← low - 1",        # 2
    "        for j in low .. high-1:",               # 3
    "            if arr[j] < pivot:",                # 4
    "                i ← i + 1; swap(arr[i], arr[j])",  # 5
    "        swap(arr[i+1], arr[high])",             # 6
    "        quick_sort(arr, low, i)",               # 7
    "        quick_sort(arr, i+2, high)",            # 8
]


def quick_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SortStepBuilder(arr)
    worklist: List[Tuple[int, int]] = [(0, len(arr) - 1)]

    while worklist:
        low, high = worklist.pop()
        if low == high:
            sb.mark_sorted(low)
            continue
        if low > high:
            continue

        pivot = arr[high]
        yield sb.build(
            "pivot",
            f"Selected pivot: {pivot} at index {high}",
            line=2,
            pivot=high,
            segment=(low, high),
        )

        i = low - 1
        for j in range(low, high):
            yield sb.build(
                "compare",
                f"Comparing {arr[j]} with pivot {pivot}",
                line=4,
                comparing=(j, high),
                pivot=high,
                segment=(low, high),
            )
            if arr[j] < pivot:
                i += 1
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    yield sb.build(
                        "swap",
                        f"Swapping {arr[i]} and {arr[j]}",
                        line=5,
                        swapping=(i, j),
                        pivot=high,
                        segment=(low, high),
                    )

        p = i + 1
        arr[p], arr[high] = arr[high], arr[p]
        sb.mark_sorted(p)
        yield sb.build(
            "swap",
            f"Placing pivot {pivot} at its final position {p}",
            line=6,
            swapping=(p, high),
            pivot=p,
            segment=(low, high),
        )

        # pushed in reverse so the left range is handled first
        worklist.append((p + 1, high))
        worklist.append((low, p - 1))

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=0)
