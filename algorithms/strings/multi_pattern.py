"""
multi_pattern.py — Multi-Pattern Search
=======================================
Finds every occurrence of several patterns by running an independent
naive scan per pattern.  This is not an Aho-Corasick automaton: cost is
O(n · Σm) rather than O(n + Σm + matches).

The result holds the sorted, de-duplicated start positions across all
patterns plus the positions found for each pattern.
"""

from typing import Dict, Generator, List

from algorithms.step import Step, StringStepBuilder


PSEUDOCODE: List[str] = [
    "def multi_pattern_search(text, patterns):",      # 0
    "    for pattern in patterns:",                   # 1
    "        for i in 0 .. n-m:",                     # 2
    "            if text[i..i+m-1] == pattern:",      # 3
    "                report (pattern, i)",            # 4
    "    return all positions",                       # 5
]


def multi_pattern_search(text: str, patterns: List[str]) -> Generator[Step, None, None]:
    n = len(text)
    sb = StringStepBuilder(text, "")
    by_pattern: Dict[str, List[int]] = {}

    yield sb.build("start", f'Searching "{text}" for {len(patterns)} pattern(s)', line=0)

    for pattern in patterns:
        m = len(pattern)
        sb.pattern = pattern
        found = by_pattern.setdefault(pattern, [])
        yield sb.build("pattern-start", f'Searching for pattern "{pattern}"', line=1)

        for i in range(n - m + 1 if m else 0):
            if text[i:i + m] != pattern:
                continue
            if i not in found:
                found.append(i)
            if i not in sb.matches:
                sb.matches.append(i)
            yield sb.build(
                "found",
                f'Pattern "{pattern}" found at index {i}',
                line=4,
                current_index=i,
                highlighted=range(i, i + m),
                window=(i, i + m - 1),
            )

    positions = sorted(sb.matches)
    yield sb.complete(
        f"Multi-pattern search complete. Found {len(positions)} distinct position(s)",
        result={"positions": positions, "patterns": by_pattern},
        line=5,
    )
