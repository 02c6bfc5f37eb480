"""
algorithms/sorting/
-------------------
In-place comparison sorts plus the distribution sorts (radix, counting,
bucket).  Every generator takes a list of numbers, never mutates it, and
ends with one `complete` step whose result is the sorted list.
"""

from algorithms.sorting.bubble_sort    import bubble_sort
from algorithms.sorting.bucket_sort    import bucket_sort
from algorithms.sorting.cocktail_sort  import cocktail_sort
from algorithms.sorting.comb_sort      import comb_sort
from algorithms.sorting.counting_sort  import counting_sort
from algorithms.sorting.heap_sort      import heap_sort
from algorithms.sorting.insertion_sort import insertion_sort
from algorithms.sorting.merge_sort     import merge_sort
from algorithms.sorting.quick_sort     import quick_sort
from algorithms.sorting.radix_sort     import radix_sort
from algorithms.sorting.selection_sort import selection_sort
from algorithms.sorting.shell_sort     import shell_sort

__all__ = [
    "bubble_sort",
    "bucket_sort",
    "cocktail_sort",
    "comb_sort",
    "counting_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
]
