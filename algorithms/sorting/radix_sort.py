"""
radix_sort.py — Radix Sort (LSD)
================================
Least-significant-digit radix sort over ten buckets.  Each pass
distributes every value by one decimal digit, then collects the buckets
back in order 0..9.  Input must be positive integers.
"""

import math
from typing import Generator, List

from algorithms.step import SortStepBuilder, Step


PSEUDOCODE: List[str] = [
    "def radix_sort(arr):",                           # 0
    "    digits ← floor(log10(max(arr))) + 1",        # 1
    "    for d in 0 .. digits-1:",                    # 2
    "        buckets ← 10 empty lists",               # 3
    "        for x in arr:",                          # 4
    "            buckets[(x // 10^d) % 10].append(x)",  # 5
    "        arr ← concat(buckets)",                  # 6
    "    return arr",                                 # 7
]


def radix_sort(numbers: List[int]) -> Generator[Step, None, None]:
    arr = list(numbers)
    sb  = SortStepBuilder(arr)

    max_digits = int(math.floor(math.log10(max(arr)))) + 1 if arr else 0
    for digit in range(max_digits):
        buckets: List[List[int]] = [[] for _ in range(10)]
        place = 10 ** digit
        yield sb.build(
            "pass-start",
            f"Starting pass for digit position {digit + 1} (from right)",
            line=3,
            buckets=buckets,
        )

        for i, value in enumerate(arr):
            bucket = (int(value) // place) % 10
            buckets[bucket].append(value)
            yield sb.build(
                "distribute",
                f"Placing {value} in bucket {bucket} (digit: {bucket})",
                line=5,
                highlighted=(i,),
                buckets=buckets,
            )

        index = 0
        for b, bucket_values in enumerate(buckets):
            for value in bucket_values:
                arr[index] = value
                yield sb.build(
                    "collect",
                    f"Collecting {value} from bucket {b} to position {index}",
                    line=6,
                    highlighted=(index,),
                    buckets=buckets,
                )
                index += 1

        yield sb.build("pass-complete", f"Completed pass for digit position {digit + 1}", line=6)

    sb.mark_all_sorted()
    yield sb.complete("Array is now fully sorted!", result=list(arr), line=7)
