"""
boyer_moore.py — Boyer-Moore (bad-character rule)
=================================================
Compares the pattern right to left at each alignment.  On a mismatch at
pattern[j] against text character c the pattern shifts by
max(1, j - last[c]); after a full match it shifts so the character just
past the window lines up with its last occurrence in the pattern.

last[] covers the 256 single-byte code points; any other character
falls back to a per-character map.  The step table lists the last
occurrence of each distinct pattern character.
"""

from typing import Dict, Generator, List

from algorithms.step import Step, StringStepBuilder


ALPHABET = 256

PSEUDOCODE: List[str] = [
    "def boyer_moore(text, pattern):",                # 0
    "    last[c] ← last index of c in pattern, else -1",  # 1
    "    s ← 0",                                      # 2
    "    while s <= n - m:",                          # 3
    "        j ← m - 1",                              # 4
    "        while j >= 0 and pattern[j] == text[s+j]: j ← j - 1",  # 5
    "        if j < 0: report s; s ← s + shift after match",        # 6
    "        else: s ← s + max(1, j - last[text[s+j]])",            # 7
    "    return matches",                             # 8
]


class LastOccurrence:
    """Last index of each character in the pattern, -1 when absent."""

    def __init__(self, pattern: str):
        self.table = [-1] * ALPHABET
        self.extra: Dict[str, int] = {}
        for i, ch in enumerate(pattern):
            code = ord(ch)
            if code < ALPHABET:
                self.table[code] = i
            else:
                self.extra[ch] = i

    def __getitem__(self, ch: str) -> int:
        code = ord(ch)
        if code < ALPHABET:
            return self.table[code]
        return self.extra.get(ch, -1)


def boyer_moore(text: str, pattern: str) -> Generator[Step, None, None]:
    n, m = len(text), len(pattern)
    last = LastOccurrence(pattern)
    shown = [[ch, last[ch]] for ch in dict.fromkeys(pattern)]
    sb = StringStepBuilder(text, pattern, table=shown)

    yield sb.build("start", f'Searching for "{pattern}" in "{text}" with Boyer-Moore', line=1)

    s = 0
    while m and s <= n - m:
        yield sb.build(
            "align",
            f"Aligning pattern at index {s}",
            line=4,
            current_index=s + m - 1,
            pattern_index=m - 1,
            window=(s, s + m - 1),
        )
        j = m - 1
        while j >= 0 and pattern[j] == text[s + j]:
            yield sb.build(
                "compare",
                f"text[{s + j}] = pattern[{j}] = '{pattern[j]}'",
                line=5,
                current_index=s + j,
                pattern_index=j,
                highlighted=(s + j,),
                window=(s, s + m - 1),
            )
            j -= 1

        if j < 0:
            sb.matches.append(s)
            yield sb.build(
                "found",
                f"Pattern found at index {s}",
                line=6,
                current_index=s,
                highlighted=range(s, s + m),
                window=(s, s + m - 1),
            )
            s += m - last[text[s + m]] if s + m < n else 1
        else:
            bad = text[s + j]
            shift = max(1, j - last[bad])
            yield sb.build(
                "mismatch",
                f"Mismatch at text[{s + j}] = '{bad}', shifting pattern by {shift}",
                line=7,
                current_index=s + j,
                pattern_index=j,
                highlighted=(s + j,),
                window=(s, s + m - 1),
            )
            s += shift

    yield sb.complete(
        f"Boyer-Moore search complete. Found {len(sb.matches)} match(es)",
        result=sorted(sb.matches),
        line=8,
    )
