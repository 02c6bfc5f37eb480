"""
bucket_sort.py — Bucket Sort
============================
Spreads values over max(5, floor(sqrt(n))) equal-width buckets, sorts
each non-empty bucket, and concatenates them.
"""

import math
from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


MIN_BUCKETS = 5

PSEUDOCODE: List[str] = [
    "def bucket_sort(arr):",                          # 0
    "    k ← max(5, floor(sqrt(n)))",                 # 1
    "    size ← ceil((max - min + 1) / k)",           # 2
    "    for x in arr:",                              # 3
    "        buckets[min((x - min) // size, k-1)].append(x)",  # 4
    "    for b in buckets:",                          # 5
    "        sort(b)",                                # 6
    "        append b to output",                     # 7
    "    return output",                              # 8
]


def bucket_sort(numbers: List[float]) -> Generator[Step, None, None]:
    arr = list(numbers)
    n   = len(arr)
    sb  = SortStepBuilder(arr)

    if n:
        bucket_count = max(MIN_BUCKETS, int(math.sqrt(n)))
        lo, hi = min(arr), max(arr)
        bucket_size = math.ceil((hi - lo + 1) / bucket_count)
        buckets: List[List[float]] = [[] for _ in range(bucket_count)]

        yield sb.build(
            "distribute-start",
            f"Distributing elements into {bucket_count} buckets",
            line=1,
            buckets=buckets,
        )

        for i, value in enumerate(arr):
            b = min(int((value - lo) // bucket_size), bucket_count - 1)
            buckets[b].append(value)
            yield sb.build(
                "distribute",
                f"Placing {value} in bucket {b}",
                line=4,
                highlighted=(i,),
                buckets=buckets,
            )

        index = 0
        for b, bucket in enumerate(buckets):
            if not bucket:
                continue
            bucket.sort()
            yield sb.build(
                "sort-bucket",
                f"Sorting bucket {b} with {len(bucket)} elements",
                line=6,
                buckets=buckets,
            )
            for value in bucket:
                arr[index] = value
                yield sb.build(
                    "collect",
                    f"Collecting {value} from bucket {b} to position {index}",
                    line=7,
                    highlighted=(index,),
                    buckets=buckets,
                )
                index += 1

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=8)
