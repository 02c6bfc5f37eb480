"""
z_algorithm.py — Z-Algorithm
============================
Builds the Z-array of pattern + sentinel + text, where Z[i] is the
length of the longest substring starting at i that is also a prefix.
Inside the current [left, right] Z-box a value is first copied from its
mirror and only then extended by direct comparison.  Z[i] == m marks a
match at i - m - 1.

The sentinel is "\\x00" unless either input contains it, in which case
the lowest code point absent from both is used.
"""

from typing import Generator, List

from algorithms.step import Step, StringStepBuilder


PSEUDOCODE: List[str] = [
    "def z_search(text, pattern):",                   # 0
    "    s ← pattern + sentinel + text",              # 1
    "    left ← right ← 0",                           # 2
    "    for i in 1 .. |s|-1:",                       # 3
    "        if i <= right: Z[i] ← min(right-i+1, Z[i-left])",  # 4
    "        while s[Z[i]] == s[i+Z[i]]: Z[i] ← Z[i] + 1",      # 5
    "        if i + Z[i] - 1 > right: left, right ← i, i+Z[i]-1",  # 6
    "        if Z[i] == m: report i - m - 1",         # 7
    "    return matches",                             # 8
]


def _sentinel(*inputs: str) -> str:
    code = 0
    while any(chr(code) in s for s in inputs):
        code += 1
    return chr(code)


def z_search(text: str, pattern: str) -> Generator[Step, None, None]:
    m = len(pattern)
    combined = pattern + _sentinel(text, pattern) + text
    size = len(combined)
    z = [0] * size
    sb = StringStepBuilder(text, pattern, table=z)

    yield sb.build("start", f'Searching for "{pattern}" in "{text}" with the Z-algorithm', line=1)

    left = right = 0
    for i in range(1, size if m else 0):
        yield sb.build(
            "compute-z",
            f"Computing Z[{i}]",
            line=3,
            current_index=i,
            window=(left, right),
        )
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
            yield sb.build(
                "copy-z",
                f"Inside Z-box [{left}, {right}]: Z[{i}] starts at {z[i]} from Z[{i - left}]",
                line=4,
                current_index=i,
                highlighted=(i - left,),
                window=(left, right),
            )

        before = z[i]
        while i + z[i] < size and combined[z[i]] == combined[i + z[i]]:
            z[i] += 1
        if z[i] > before:
            yield sb.build(
                "extend-z",
                f"Extended Z[{i}] from {before} to {z[i]} by direct comparison",
                line=5,
                current_index=i,
                highlighted=range(i + before, i + z[i]),
                window=(i, i + z[i] - 1),
            )

        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1

        if z[i] == m:
            start = i - m - 1
            sb.matches.append(start)
            yield sb.build(
                "found",
                f"Z[{i}] = {m}: pattern found at index {start}",
                line=7,
                current_index=start,
                highlighted=range(start, start + m),
                window=(left, right),
            )

    yield sb.complete(
        f"Z-algorithm search complete. Found {len(sb.matches)} match(es)",
        result=sorted(sb.matches),
        line=8,
    )
