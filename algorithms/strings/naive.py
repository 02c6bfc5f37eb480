"""
naive.py — Naive String Matching
================================
Slides the pattern across every alignment and compares character by
character until a mismatch or a full match.
"""

from typing import Generator, List

from algorithms.step import Step, StringStepBuilder


PSEUDOCODE: List[str] = [
    "def naive_search(text, pattern):",               # 0
    "    for i in 0 .. n-m:",                         # 1
    "        j ← 0",                                  # 2
    "        while j < m and text[i+j] == pattern[j]:",  # 3
    "            j ← j + 1",                          # 4
    "        if j == m: report match at i",           # 5
    "    return matches",                             # 6
]


def naive_search(text: str, pattern: str) -> Generator[Step, None, None]:
    n, m = len(text), len(pattern)
    sb = StringStepBuilder(text, pattern)

    yield sb.build("start", f'Searching for "{pattern}" in "{text}" with the naive method', line=0)

    for i in range(n - m + 1 if m else 0):
        yield sb.build(
            "start-match",
            f"Trying alignment at index {i}",
            line=2,
            current_index=i,
            pattern_index=0,
            window=(i, i + m - 1),
        )
        j = 0
        while j < m:
            if text[i + j] != pattern[j]:
                yield sb.build(
                    "mismatch",
                    f"Mismatch: text[{i + j}] = '{text[i + j]}' != pattern[{j}] = '{pattern[j]}'",
                    line=3,
                    current_index=i + j,
                    pattern_index=j,
                    highlighted=(i + j,),
                    window=(i, i + m - 1),
                )
                break
            yield sb.build(
                "match-char",
                f"Match: text[{i + j}] = pattern[{j}] = '{pattern[j]}'",
                line=4,
                current_index=i + j,
                pattern_index=j,
                highlighted=(i + j,),
                window=(i, i + m - 1),
            )
            j += 1

        if j == m:
            sb.matches.append(i)
            yield sb.build(
                "found",
                f"Pattern found at index {i}",
                line=5,
                current_index=i,
                highlighted=range(i, i + m),
                window=(i, i + m - 1),
            )

    yield sb.complete(
        f"Search complete. Found {len(sb.matches)} match(es)",
        result=sorted(sb.matches),
        line=6,
    )
