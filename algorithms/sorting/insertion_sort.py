"""
insertion_sort.py — Insertion Sort
==================================
Grows a sorted prefix one element at a time: the next element is
selected, larger prefix values are shifted right, and the element is
inserted into the gap.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                       # 0
    "    for i in 1 .. n-1:",                         # 1
    "        key ← arr[i]; j ← i - 1",                # 2
    "        while j >= 0 and arr[j] > key:",         # 3
    "            arr[j+1] ← arr[j]",                  # 4
    "            j ← j - 1",                          # 5
    "        arr[j+1] ← key",                         # 6
    "    return arr",                                 # 7
]


def insertion_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)
    if n:
        sb.mark_sorted(0)

    for i in range(1, n):
        key = arr[i]
        j = i - 1
        yield sb.build("select", f"Selecting {key} at index {i} to insert", line=2, highlighted=(i,))

        while j >= 0:
            yield sb.build(
                "compare",
                f"Comparing {arr[j]} with {key}",
                line=3,
                comparing=(j, j + 1),
            )
            if arr[j] <= key:
                break
            arr[j + 1] = arr[j]
            yield sb.build("shift", f"Shifting {arr[j]} one position right", line=4, highlighted=(j, j + 1))
            j -= 1

        arr[j + 1] = key
        sb.mark_sorted(i)
        yield sb.build("insert", f"Inserting {key} at index {j + 1}", line=6, highlighted=(j + 1,))

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=7)
