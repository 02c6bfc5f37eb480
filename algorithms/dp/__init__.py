"""
algorithms/dp/
--------------
Tabulated dynamic programs.  The step table is a snapshot of the DP
table (1-D tables as a single row, unreachable entries as None); each
cell is written once per pass.
"""

from algorithms.dp.coin_change             import coin_change
from algorithms.dp.edit_distance           import edit_distance
from algorithms.dp.fibonacci               import fibonacci
from algorithms.dp.knapsack                import knapsack
from algorithms.dp.lcs                     import longest_common_subsequence
from algorithms.dp.lis                     import longest_increasing_subsequence
from algorithms.dp.matrix_chain            import matrix_chain
from algorithms.dp.palindrome_partitioning import palindrome_partitioning
from algorithms.dp.rod_cutting             import rod_cutting
from algorithms.dp.subset_sum              import subset_sum

__all__ = [
    "coin_change",
    "edit_distance",
    "fibonacci",
    "knapsack",
    "longest_common_subsequence",
    "longest_increasing_subsequence",
    "matrix_chain",
    "palindrome_partitioning",
    "rod_cutting",
    "subset_sum",
]
