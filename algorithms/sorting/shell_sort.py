"""
shell_sort.py — Shell Sort
==========================
Gapped insertion sort over the sequence n/2, n/4, … 1.  Each element is
`select`ed, compared against its gap-predecessors, which are `shift`ed
right until the `insert` point is found.
"""

from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def shell_sort(arr):",                           # 0
    "    gap ← n // 2",                               # 1
    "    while gap > 0:",                             # 2
    "        for i in gap .. n-1:",                   # 3
    "            temp ← arr[i]; j ← i",               # 4
    "            while j >= gap and arr[j-gap] > temp:",  # 5
    "                arr[j] ← arr[j-gap]",            # 6
    "                j ← j - gap",                    # 7
    "            arr[j] ← temp",                      # 8
    "        gap ← gap // 2",                         # 9
    "    return arr",                                 # 10
]


def shell_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)
    gap = n // 2

    while gap > 0:
        yield sb.build("gap-start", f"Starting gapped insertion sort with gap {gap}", line=2, gap=gap)

        for i in range(gap, n):
            temp = arr[i]
            j = i
            yield sb.build("select", f"Selecting {temp} at index {i}", line=4, highlighted=(i,), gap=gap)

            while j >= gap:
                yield sb.build(
                    "compare",
                    f"Comparing {arr[j - gap]} (index {j - gap}) with {temp}",
                    line=5,
                    comparing=(j - gap, j),
                    gap=gap,
                )
                if arr[j - gap] <= temp:
                    break
                arr[j] = arr[j - gap]
                yield sb.build(
                    "shift",
                    f"Shifting {arr[j]} from index {j - gap} to index {j}",
                    line=6,
                    highlighted=(j - gap, j),
                    gap=gap,
                )
                j -= gap

            arr[j] = temp
            yield sb.build("insert", f"Inserting {temp} at index {j}", line=8, highlighted=(j,), gap=gap)

        gap //= 2

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=10)
