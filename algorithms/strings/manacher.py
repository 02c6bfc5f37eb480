"""
manacher.py — Manacher's Longest Palindromic Substring
======================================================
Interleaves separators (text → ^#t#e#x#t#$) so every palindrome has odd
length, then computes P[i], the palindrome radius around each position,
reusing the mirror value inside the rightmost palindrome found so far.

Positions in the steps refer to the transformed string; the result is
the longest palindromic substring of the original text and `matches`
holds its start.
"""

from typing import Generator, List

from algorithms.step import Step, StringStepBuilder


PSEUDOCODE: List[str] = [
    "def manacher(text):",                            # 0
    "    t ← ^#t#e#x#t#$",                            # 1
    "    center ← right ← 0",                         # 2
    "    for i in 1 .. |t|-2:",                       # 3
    "        if i < right: P[i] ← min(right-i, P[2·center-i])",  # 4
    "        while t[i+P[i]+1] == t[i-P[i]-1]: P[i] ← P[i] + 1",  # 5
    "        if i + P[i] > right: center, right ← i, i + P[i]",   # 6
    "    return longest palindrome",                  # 7
]


def manacher(text: str) -> Generator[Step, None, None]:
    t = "^#" + "#".join(text) + "#$" if text else "^$"
    p = [0] * len(t)
    sb = StringStepBuilder(text, "", table=p)

    yield sb.build("start", f'Transformed "{text}" into "{t}"', line=1)

    center = right = 0
    best_len, best_center = 0, 0
    for i in range(1, len(t) - 1):
        if i < right:
            p[i] = min(right - i, p[2 * center - i])

        before = p[i]
        while t[i + p[i] + 1] == t[i - p[i] - 1]:
            p[i] += 1
        yield sb.build(
            "expand",
            f"Radius at {i} expanded from {before} to {p[i]}",
            line=5,
            current_index=i,
            window=(i - p[i], i + p[i]),
        )

        if i + p[i] > right:
            center, right = i, i + p[i]
            yield sb.build(
                "update-center",
                f"New rightmost palindrome centred at {center}, reaching {right}",
                line=6,
                current_index=i,
                window=(center - p[i], right),
            )

        if p[i] > best_len:
            best_len, best_center = p[i], i

    start = (best_center - best_len - 1) // 2
    longest = text[start:start + best_len]
    if longest:
        sb.matches.append(start)
    yield sb.complete(
        f'Longest palindromic substring: "{longest}"',
        result=longest,
        line=7,
        highlighted=range(start, start + best_len),
    )
