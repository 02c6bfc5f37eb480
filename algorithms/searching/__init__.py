"""
algorithms/searching/
---------------------
Search a list of numbers for a target.  Every generator ends with a
`found` / `not-found` step followed by `complete`, whose result is
{"found": bool, "index": int} (index -1 when absent).  All but linear
search expect sorted input.
"""

from algorithms.searching.binary_search        import binary_search
from algorithms.searching.exponential_search   import exponential_search
from algorithms.searching.fibonacci_search     import fibonacci_search
from algorithms.searching.interpolation_search import interpolation_search
from algorithms.searching.jump_search          import jump_search
from algorithms.searching.linear_search        import linear_search
from algorithms.searching.ternary_search       import ternary_search

__all__ = [
    "binary_search",
    "exponential_search",
    "fibonacci_search",
    "interpolation_search",
    "jump_search",
    "linear_search",
    "ternary_search",
]
