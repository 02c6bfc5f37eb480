"""
algorithms/strings/
-------------------
Exact string matching.  Every search ends with a `complete` step whose
`matches` (and result) are the sorted match start positions; Manacher
reports the longest palindrome instead.
"""

from algorithms.strings.boyer_moore   import boyer_moore
from algorithms.strings.kmp           import kmp_search
from algorithms.strings.manacher      import manacher
from algorithms.strings.multi_pattern import multi_pattern_search
from algorithms.strings.naive         import naive_search
from algorithms.strings.rabin_karp    import rabin_karp
from algorithms.strings.z_algorithm   import z_search

__all__ = [
    "boyer_moore",
    "kmp_search",
    "manacher",
    "multi_pattern_search",
    "naive_search",
    "rabin_karp",
    "z_search",
]
