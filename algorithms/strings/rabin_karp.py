"""
rabin_karp.py — Rabin-Karp
==========================
Rolling polynomial hash with base 256 modulo 101.  Equal hashes are
only candidates: the window is verified character by character before a
match is reported, and a failed verification is a `spurious-hit`.
"""

from typing import Generator, List

from algorithms.step import Step, StringStepBuilder


BASE  = 256
PRIME = 101

PSEUDOCODE: List[str] = [
    "def rabin_karp(text, pattern):",                 # 0
    "    h ← BASE^(m-1) mod PRIME",                   # 1
    "    p ← hash(pattern); t ← hash(text[0..m-1])",  # 2
    "    for s in 0 .. n-m:",                         # 3
    "        if p == t:",                             # 4
    "            if text[s..s+m-1] == pattern: report s",  # 5
    "        if s < n-m:",                            # 6
    "            t ← (BASE·(t - text[s]·h) + text[s+m]) mod PRIME",  # 7
    "    return matches",                             # 8
]


def rabin_karp(text: str, pattern: str) -> Generator[Step, None, None]:
    n, m = len(text), len(pattern)
    sb = StringStepBuilder(text, pattern)

    yield sb.build("start", f'Searching for "{pattern}" in "{text}" with Rabin-Karp', line=0)
    if m == 0 or m > n:
        yield sb.complete("Pattern cannot occur in the text", result=[], line=8)
        return

    h = pow(BASE, m - 1, PRIME)
    p_hash = t_hash = 0
    for k in range(m):
        p_hash = (BASE * p_hash + ord(pattern[k])) % PRIME
        t_hash = (BASE * t_hash + ord(text[k])) % PRIME
    yield sb.build(
        "hash-init",
        f"Pattern hash = {p_hash}, first window hash = {t_hash}",
        line=2,
        window=(0, m - 1),
        pattern_hash=p_hash,
        window_hash=t_hash,
    )

    for s in range(n - m + 1):
        yield sb.build(
            "compare-hash",
            f"Window [{s}, {s + m - 1}]: hash {t_hash} vs pattern hash {p_hash}",
            line=4,
            current_index=s,
            window=(s, s + m - 1),
            pattern_hash=p_hash,
            window_hash=t_hash,
        )
        if t_hash == p_hash:
            if text[s:s + m] == pattern:
                sb.matches.append(s)
                yield sb.build(
                    "found",
                    f"Hashes match and characters verified: pattern found at index {s}",
                    line=5,
                    current_index=s,
                    highlighted=range(s, s + m),
                    window=(s, s + m - 1),
                    pattern_hash=p_hash,
                    window_hash=t_hash,
                )
            else:
                yield sb.build(
                    "spurious-hit",
                    f"Hashes match but characters differ at window {s}",
                    line=5,
                    current_index=s,
                    window=(s, s + m - 1),
                    pattern_hash=p_hash,
                    window_hash=t_hash,
                )

        if s < n - m:
            t_hash = (BASE * (t_hash - ord(text[s]) * h) + ord(text[s + m])) % PRIME
            yield sb.build(
                "roll-hash",
                f"Rolling hash: drop '{text[s]}', add '{text[s + m]}' → {t_hash}",
                line=7,
                current_index=s + 1,
                window=(s + 1, s + m),
                pattern_hash=p_hash,
                window_hash=t_hash,
            )

    yield sb.complete(
        f"Rabin-Karp search complete. Found {len(sb.matches)} match(es)",
        result=sorted(sb.matches),
        line=8,
    )
