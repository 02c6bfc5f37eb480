"""
merge_sort.py — Merge Sort
==========================
Top-down merge sort.  Every segment is `divide`d at its midpoint, both
halves are sorted, then merged back: `split` shows the two runs, each
`compare` picks the smaller head (ties favour the left run, so the sort
is stable), and each write into the array is a `merge` step.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",             # 0
    "    if left >= right: return",                  # 1
    "    mid ← (left + right) // 2",                 # 2
    "    merge_sort(arr, left, mid)",                # 3
    "    merge_sort(arr, mid+1, right)",             # 4
    "    L ← arr[left..mid]; R ← arr[mid+1..right]", # 5
    "    while L and R:",                            # 6
    "        take smaller head (L on ties)",         # 7
    "    copy remaining L, then remaining R",        # 8
]


def merge_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SortStepBuilder(arr)
    if arr:
        yield from _sort(arr, sb, 0, len(arr) - 1)
    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=0)


def _sort(arr: List[float], sb: SortStepBuilder, left: int, right: int) -> Generator[Step, None, None]:
    if left >= right:
        return
    mid = (left + right) // 2
    yield sb.build(
        "divide",
        f"Dividing array segment [{left}...{right}] at midpoint {mid}",
        line=2,
        highlighted=(left, mid, right),
        segment=(left, right),
    )
    yield from _sort(arr, sb, left, mid)
    yield from _sort(arr, sb, mid + 1, right)
    yield from _merge(arr, sb, left, mid, right)


def _merge(arr: List[float], sb: SortStepBuilder, left: int, mid: int, right: int) -> Generator[Step, None, None]:
    left_run  = arr[left:mid + 1]
    right_run = arr[mid + 1:right + 1]
    yield sb.build(
        "split",
        f"Merging segments [{left}...{mid}] and [{mid + 1}...{right}]",
        line=5,
        auxiliary=left_run + right_run,
        highlighted=range(left, right + 1),
        segment=(left, right),
    )

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        yield sb.build(
            "compare",
            f"Comparing {left_run[i]} and {right_run[j]}",
            line=7,
            comparing=(left + i, mid + 1 + j),
            segment=(left, right),
        )
        if left_run[i] <= right_run[j]:
            arr[k] = left_run[i]
            i += 1
        else:
            arr[k] = right_run[j]
            j += 1
        yield sb.build("merge", f"Placed {arr[k]} at position {k}", line=7, highlighted=(k,), segment=(left, right))
        k += 1

    for run, pos in ((left_run, i), (right_run, j)):
        for value in run[pos:]:
            arr[k] = value
            yield sb.build("merge", f"Copied remaining {value} to position {k}", line=8, highlighted=(k,), segment=(left, right))
            k += 1

    yield sb.build("merged", f"Merged segment [{left}...{right}]", line=8, segment=(left, right))
