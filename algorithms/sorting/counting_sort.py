"""
counting_sort.py — Counting Sort
================================
Counts occurrences over the value range max-min+1, turns the counts into
cumulative end positions, then places values right-to-left into an
output buffer so equal values keep their input order.
"""

from typing import Generator, List, Optional

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def counting_sort(arr):",                        # 0
    "    count ← zeros(max - min + 1)",               # 1
    "    for x in arr: count[x - min] += 1",          # 2
    "    for i in 1 .. k-1: count[i] += count[i-1]",  # 3
    "    for x in reversed(arr):",                    # 4
    "        count[x - min] -= 1",                    # 5
    "        out[count[x - min]] ← x",                # 6
    "    arr ← out",                                  # 7
]


def counting_sort(numbers: List[int]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)

    if n:
        lo, hi = min(arr), max(arr)
        count = [0] * (hi - lo + 1)
        yield sb.build("count-start", f"Counting occurrences of each element (range: {lo} to {hi})", line=1)

        for i, value in enumerate(arr):
            count[value - lo] += 1
            yield sb.build(
                "count",
                f"Counting element {value}: count = {count[value - lo]}",
                line=2,
                highlighted=(i,),
                auxiliary=count,
            )

        for i in range(1, len(count)):
            count[i] += count[i - 1]
            yield sb.build(
                "prefix-sum",
                f"Cumulative count for {lo + i}: {count[i]}",
                line=3,
                auxiliary=count,
            )

        output: List[Optional[int]] = [None] * n
        for i in range(n - 1, -1, -1):
            value = arr[i]
            count[value - lo] -= 1
            position = count[value - lo]
            output[position] = value
            yield sb.build(
                "place",
                f"Placing {value} at position {position} in output array",
                line=6,
                highlighted=(i,),
                auxiliary=output,
            )

        for i, value in enumerate(output):
            arr[i] = value
            yield sb.build("collect", f"Copying {value} back to position {i}", line=7, highlighted=(i,))

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=7)
