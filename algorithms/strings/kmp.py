"""
kmp.py — Knuth-Morris-Pratt
===========================
Two phases.  First the LPS table: lps[i] is the length of the longest
proper prefix of pattern[0..i] that is also a suffix of it.  Then the
scan, which never moves backwards in the text: on a mismatch the pattern
index falls back to lps[j-1], and after a full match the scan resumes at
lps[m-1] so overlapping matches are found.

The step table is the LPS array.
"""

from typing import Generator, List

from algorithms.step import Step, StringStepBuilder


PSEUDOCODE: List[str] = [
    "def kmp_search(text, pattern):",                 # 0
    "    lps ← build_lps(pattern)",                   # 1
    "    i ← 0; j ← 0",                               # 2
    "    while i < n:",                               # 3
    "        if text[i] == pattern[j]:",              # 4
    "            i ← i + 1; j ← j + 1",               # 5
    "            if j == m: report i - j; j ← lps[j-1]",  # 6
    "        elif j > 0: j ← lps[j-1]",               # 7
    "        else: i ← i + 1",                        # 8
    "    return matches",                             # 9
]


def kmp_search(text: str, pattern: str) -> Generator[Step, None, None]:
    n, m = len(text), len(pattern)
    lps = [0] * m
    sb = StringStepBuilder(text, pattern, table=lps)

    yield sb.build("start", f'Searching for "{pattern}" in "{text}" with KMP', line=0)
    if m == 0:
        yield sb.complete("Empty pattern, nothing to search", result=[], line=9)
        return

    # -- LPS construction --
    yield sb.build("lps-start", "Building the longest-prefix-suffix table", line=1, pattern_index=0)
    length, i = 0, 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            yield sb.build(
                "lps-match",
                f"pattern[{i}] = pattern[{length - 1}] = '{pattern[i]}': lps[{i}] = {length}",
                line=1,
                pattern_index=i,
                highlighted=(length - 1, i),
            )
            i += 1
        elif length:
            length = lps[length - 1]
            yield sb.build(
                "lps-fallback",
                f"Mismatch at pattern[{i}], falling back to prefix length {length}",
                line=1,
                pattern_index=i,
            )
        else:
            lps[i] = 0
            yield sb.build(
                "lps-no-match",
                f"No prefix matches at pattern[{i}]: lps[{i}] = 0",
                line=1,
                pattern_index=i,
            )
            i += 1
    yield sb.build("lps-complete", f"LPS table complete: {lps}", line=1)

    # -- scan --
    i = j = 0
    while i < n:
        yield sb.build(
            "compare",
            f"Comparing text[{i}] = '{text[i]}' with pattern[{j}] = '{pattern[j]}'",
            line=4,
            current_index=i,
            pattern_index=j,
            highlighted=(i,),
            window=(i - j, i - j + m - 1),
        )
        if text[i] == pattern[j]:
            i += 1
            j += 1
            yield sb.build(
                "match",
                f"Characters match, advancing to text[{i}] / pattern[{j}]",
                line=5,
                current_index=i - 1,
                pattern_index=j - 1,
                window=(i - j, i - j + m - 1),
            )
            if j == m:
                start = i - j
                sb.matches.append(start)
                yield sb.build(
                    "found",
                    f"Pattern found at index {start}",
                    line=6,
                    current_index=start,
                    highlighted=range(start, start + m),
                    window=(start, start + m - 1),
                )
                j = lps[j - 1]
        elif j > 0:
            j = lps[j - 1]
            yield sb.build(
                "mismatch-shift",
                f"Mismatch, shifting pattern using lps: j = {j}",
                line=7,
                current_index=i,
                pattern_index=j,
            )
        else:
            i += 1
            yield sb.build(
                "mismatch-advance",
                f"Mismatch at pattern start, advancing text to index {i}",
                line=8,
                current_index=i - 1,
                pattern_index=0,
            )

    yield sb.complete(
        f"KMP search complete. Found {len(sb.matches)} match(es)",
        result=sorted(sb.matches),
        line=9,
    )
