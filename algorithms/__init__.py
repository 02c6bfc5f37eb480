"""
algorithms/__init__.py — Algorithm Registry
===========================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "bubble-sort": AlgoInfo(key, label, category, fn, pseudocode, params, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The recorder, the validator and
the HTTP layer all consume it, so adding a new algorithm is: write the
generator, add one entry here.

`params` names the input-dict keys, in the order they are handed to the
generator as positional arguments.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.sorting.bubble_sort    import bubble_sort,    PSEUDOCODE as _bubble_pc
from algorithms.sorting.quick_sort     import quick_sort,     PSEUDOCODE as _quick_pc
from algorithms.sorting.merge_sort     import merge_sort,     PSEUDOCODE as _merge_pc
from algorithms.sorting.heap_sort      import heap_sort,      PSEUDOCODE as _heap_pc
from algorithms.sorting.insertion_sort import insertion_sort, PSEUDOCODE as _insertion_pc
from algorithms.sorting.selection_sort import selection_sort, PSEUDOCODE as _selection_pc
from algorithms.sorting.radix_sort     import radix_sort,     PSEUDOCODE as _radix_pc
from algorithms.sorting.counting_sort  import counting_sort,  PSEUDOCODE as _counting_pc
from algorithms.sorting.bucket_sort    import bucket_sort,    PSEUDOCODE as _bucket_pc
from algorithms.sorting.shell_sort     import shell_sort,     PSEUDOCODE as _shell_pc
from algorithms.sorting.cocktail_sort  import cocktail_sort,  PSEUDOCODE as _cocktail_pc
from algorithms.sorting.comb_sort      import comb_sort,      PSEUDOCODE as _comb_pc

from algorithms.searching.linear_search        import linear_search,        PSEUDOCODE as _linear_pc
from algorithms.searching.binary_search        import binary_search,        PSEUDOCODE as _binary_pc
from algorithms.searching.jump_search          import jump_search,          PSEUDOCODE as _jump_pc
from algorithms.searching.interpolation_search import interpolation_search, PSEUDOCODE as _interp_pc
from algorithms.searching.exponential_search   import exponential_search,   PSEUDOCODE as _expo_pc
from algorithms.searching.ternary_search       import ternary_search,       PSEUDOCODE as _ternary_pc
from algorithms.searching.fibonacci_search     import fibonacci_search,     PSEUDOCODE as _fibsearch_pc

from algorithms.graphs.bfs            import bfs,            PSEUDOCODE as _bfs_pc
from algorithms.graphs.dfs            import dfs,            PSEUDOCODE as _dfs_pc
from algorithms.graphs.dijkstra       import dijkstra,       PSEUDOCODE as _dij_pc
from algorithms.graphs.bellman_ford   import bellman_ford,   PSEUDOCODE as _bf_pc
from algorithms.graphs.floyd_warshall import floyd_warshall, PSEUDOCODE as _fw_pc
from algorithms.graphs.kruskal        import kruskal,        PSEUDOCODE as _kruskal_pc
from algorithms.graphs.prim           import prim,           PSEUDOCODE as _prim_pc

from algorithms.dp.fibonacci               import fibonacci,                      PSEUDOCODE as _fib_pc
from algorithms.dp.knapsack                import knapsack,                       PSEUDOCODE as _knap_pc
from algorithms.dp.lcs                     import longest_common_subsequence,     PSEUDOCODE as _lcs_pc
from algorithms.dp.edit_distance           import edit_distance,                  PSEUDOCODE as _edit_pc
from algorithms.dp.coin_change             import coin_change,                    PSEUDOCODE as _coin_pc
from algorithms.dp.matrix_chain            import matrix_chain,                   PSEUDOCODE as _mcm_pc
from algorithms.dp.lis                     import longest_increasing_subsequence, PSEUDOCODE as _lis_pc
from algorithms.dp.rod_cutting             import rod_cutting,                    PSEUDOCODE as _rod_pc
from algorithms.dp.subset_sum              import subset_sum,                     PSEUDOCODE as _subset_pc
from algorithms.dp.palindrome_partitioning import palindrome_partitioning,        PSEUDOCODE as _palin_pc

from algorithms.strings.naive         import naive_search,         PSEUDOCODE as _naive_pc
from algorithms.strings.kmp           import kmp_search,           PSEUDOCODE as _kmp_pc
from algorithms.strings.rabin_karp    import rabin_karp,           PSEUDOCODE as _rk_pc
from algorithms.strings.boyer_moore   import boyer_moore,          PSEUDOCODE as _bm_pc
from algorithms.strings.z_algorithm   import z_search,             PSEUDOCODE as _z_pc
from algorithms.strings.manacher      import manacher,             PSEUDOCODE as _manacher_pc
from algorithms.strings.multi_pattern import multi_pattern_search, PSEUDOCODE as _multi_pc

from algorithms.step import Step


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
SORTING   = "sorting"
SEARCHING = "searching"
GRAPH     = "graph"
DP        = "dynamic-programming"
STRING    = "string"

CATEGORIES = (SORTING, SEARCHING, GRAPH, DP, STRING)

_ARRAY   = ["array"]
_SEARCH  = ["array", "target"]
_GRAPH   = ["nodes", "edges", "startNode"]
_GRAPH_ALL = ["nodes", "edges"]
_PATTERN = ["text", "pattern"]


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble-sort"
    label:            str                    # human label, e.g. "Bubble Sort"
    category:         str                    # one of CATEGORIES
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    params:           List[str]              # input keys → positional args
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""         # e.g. "O(n log n)"
    complexity_space: str       = ""         # e.g. "O(n)"
    description:      str       = ""         # one-liner for the catalog

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.key,
            "name":        self.label,
            "category":    self.category,
            "params":      list(self.params),
            "tags":        list(self.tags),
            "complexity":  {"time": self.complexity_time, "space": self.complexity_space},
            "description": self.description,
            "pseudocode":  list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # -- sorting --
    "bubble-sort": AlgoInfo(
        key="bubble-sort", label="Bubble Sort", category=SORTING,
        fn=bubble_sort, pseudocode=_bubble_pc, params=_ARRAY,
        tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs. Stops after a pass with no swap.",
    ),

    "quick-sort": AlgoInfo(
        key="quick-sort", label="Quick Sort", category=SORTING,
        fn=quick_sort, pseudocode=_quick_pc, params=_ARRAY,
        tags=["comparison", "divide-and-conquer", "in-place"],
        complexity_time="O(n log n) average, O(n²) worst", complexity_space="O(log n)",
        description="Partitions around the last element (Lomuto), then sorts both sides.",
    ),

    "merge-sort": AlgoInfo(
        key="merge-sort", label="Merge Sort", category=SORTING,
        fn=merge_sort, pseudocode=_merge_pc, params=_ARRAY,
        tags=["comparison", "divide-and-conquer", "stable"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, sorts each, merges the sorted runs.",
    ),

    "heap-sort": AlgoInfo(
        key="heap-sort", label="Heap Sort", category=SORTING,
        fn=heap_sort, pseudocode=_heap_pc, params=_ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root behind the heap.",
    ),

    "insertion-sort": AlgoInfo(
        key="insertion-sort", label="Insertion Sort", category=SORTING,
        fn=insertion_sort, pseudocode=_insertion_pc, params=_ARRAY,
        tags=["comparison", "stable", "in-place", "adaptive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Inserts each element into the sorted prefix by shifting larger values right.",
    ),

    "selection-sort": AlgoInfo(
        key="selection-sort", label="Selection Sort", category=SORTING,
        fn=selection_sort, pseudocode=_selection_pc, params=_ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted suffix and swaps it into place.",
    ),

    "radix-sort": AlgoInfo(
        key="radix-sort", label="Radix Sort", category=SORTING,
        fn=radix_sort, pseudocode=_radix_pc, params=_ARRAY,
        tags=["distribution", "stable", "integers"],
        complexity_time="O(d·n)", complexity_space="O(n + k)",
        description="Distributes positive integers into ten buckets, one decimal digit at a time.",
    ),

    "counting-sort": AlgoInfo(
        key="counting-sort", label="Counting Sort", category=SORTING,
        fn=counting_sort, pseudocode=_counting_pc, params=_ARRAY,
        tags=["distribution", "stable", "integers"],
        complexity_time="O(n + k)", complexity_space="O(k)",
        description="Counts each value, accumulates positions, places values right to left.",
    ),

    "bucket-sort": AlgoInfo(
        key="bucket-sort", label="Bucket Sort", category=SORTING,
        fn=bucket_sort, pseudocode=_bucket_pc, params=_ARRAY,
        tags=["distribution"],
        complexity_time="O(n + k)", complexity_space="O(n + k)",
        description="Spreads values over equal-width buckets, sorts each, concatenates.",
    ),

    "shell-sort": AlgoInfo(
        key="shell-sort", label="Shell Sort", category=SORTING,
        fn=shell_sort, pseudocode=_shell_pc, params=_ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n log² n)", complexity_space="O(1)",
        description="Insertion sort over a halving gap sequence.",
    ),

    "cocktail-sort": AlgoInfo(
        key="cocktail-sort", label="Cocktail Shaker Sort", category=SORTING,
        fn=cocktail_sort, pseudocode=_cocktail_pc, params=_ARRAY,
        tags=["comparison", "stable", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Bubble sort in both directions, shrinking the window from each end.",
    ),

    "comb-sort": AlgoInfo(
        key="comb-sort", label="Comb Sort", category=SORTING,
        fn=comb_sort, pseudocode=_comb_pc, params=_ARRAY,
        tags=["comparison", "in-place"],
        complexity_time="O(n²/2ᵖ) where p is increments", complexity_space="O(1)",
        description="Bubble sort over a gap that shrinks by 1.3 each pass.",
    ),

    # -- searching --
    "linear-search": AlgoInfo(
        key="linear-search", label="Linear Search", category=SEARCHING,
        fn=linear_search, pseudocode=_linear_pc, params=_SEARCH,
        tags=["unsorted"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element left to right.",
    ),

    "binary-search": AlgoInfo(
        key="binary-search", label="Binary Search", category=SEARCHING,
        fn=binary_search, pseudocode=_binary_pc, params=_SEARCH,
        tags=["sorted"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the sorted range around its middle element.",
    ),

    "jump-search": AlgoInfo(
        key="jump-search", label="Jump Search", category=SEARCHING,
        fn=jump_search, pseudocode=_jump_pc, params=_SEARCH,
        tags=["sorted"],
        complexity_time="O(√n)", complexity_space="O(1)",
        description="Jumps ahead by √n, then scans the block that can hold the target.",
    ),

    "interpolation-search": AlgoInfo(
        key="interpolation-search", label="Interpolation Search", category=SEARCHING,
        fn=interpolation_search, pseudocode=_interp_pc, params=_SEARCH,
        tags=["sorted", "uniform"],
        complexity_time="O(log log n) average", complexity_space="O(1)",
        description="Estimates the target's position from the values at the range ends.",
    ),

    "exponential-search": AlgoInfo(
        key="exponential-search", label="Exponential Search", category=SEARCHING,
        fn=exponential_search, pseudocode=_expo_pc, params=_SEARCH,
        tags=["sorted"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Doubles a bound until it passes the target, then binary searches.",
    ),

    "ternary-search": AlgoInfo(
        key="ternary-search", label="Ternary Search", category=SEARCHING,
        fn=ternary_search, pseudocode=_ternary_pc, params=_SEARCH,
        tags=["sorted"],
        complexity_time="O(log₃ n)", complexity_space="O(1)",
        description="Splits the sorted range into thirds.",
    ),

    "fibonacci-search": AlgoInfo(
        key="fibonacci-search", label="Fibonacci Search", category=SEARCHING,
        fn=fibonacci_search, pseudocode=_fibsearch_pc, params=_SEARCH,
        tags=["sorted"],
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Splits the sorted range at Fibonacci offsets.",
    ),

    # -- graph --
    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", category=GRAPH,
        fn=bfs, pseudocode=_bfs_pc, params=_GRAPH,
        tags=["traversal", "unweighted"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", category=GRAPH,
        fn=dfs, pseudocode=_dfs_pc, params=_GRAPH,
        tags=["traversal", "unweighted"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep along each branch before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", category=GRAPH,
        fn=dijkstra, pseudocode=_dij_pc, params=_GRAPH,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily settles the closest node. Optimal for non-negative weights.",
    ),

    "bellman-ford": AlgoInfo(
        key="bellman-ford", label="Bellman-Ford Algorithm", category=GRAPH,
        fn=bellman_ford, pseudocode=_bf_pc, params=_GRAPH,
        tags=["weighted", "shortest-path", "negative-edges", "directed"],
        complexity_time="O(VE)", complexity_space="O(V)",
        description="Handles negative edges and detects negative cycles.",
    ),

    "floyd-warshall": AlgoInfo(
        key="floyd-warshall", label="Floyd-Warshall Algorithm", category=GRAPH,
        fn=floyd_warshall, pseudocode=_fw_pc, params=_GRAPH_ALL,
        tags=["weighted", "all-pairs", "negative-edges", "directed"],
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths. Watch the matrix evolve.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", category=GRAPH,
        fn=kruskal, pseudocode=_kruskal_pc, params=_GRAPH_ALL,
        tags=["weighted", "mst", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Adds the lightest edge that does not close a cycle.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", category=GRAPH,
        fn=prim, pseudocode=_prim_pc, params=_GRAPH,
        tags=["weighted", "mst"],
        complexity_time="O(E log V)", complexity_space="O(V)",
        description="Grows a tree from the start node along the lightest crossing edge.",
    ),

    # -- dynamic programming --
    "fibonacci-dp": AlgoInfo(
        key="fibonacci-dp", label="Fibonacci (DP)", category=DP,
        fn=fibonacci, pseudocode=_fib_pc, params=["n"],
        tags=["1d-table"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Bottom-up Fibonacci numbers.",
    ),

    "knapsack": AlgoInfo(
        key="knapsack", label="0/1 Knapsack", category=DP,
        fn=knapsack, pseudocode=_knap_pc, params=["weights", "values", "capacity"],
        tags=["2d-table", "optimisation"],
        complexity_time="O(nW)", complexity_space="O(nW)",
        description="Best total value within a weight capacity, each item taken at most once.",
    ),

    "lcs": AlgoInfo(
        key="lcs", label="Longest Common Subsequence", category=DP,
        fn=longest_common_subsequence, pseudocode=_lcs_pc, params=["str1", "str2"],
        tags=["2d-table", "strings"],
        complexity_time="O(mn)", complexity_space="O(mn)",
        description="Longest sequence of characters appearing in order in both strings.",
    ),

    "edit-distance": AlgoInfo(
        key="edit-distance", label="Edit Distance", category=DP,
        fn=edit_distance, pseudocode=_edit_pc, params=["str1", "str2"],
        tags=["2d-table", "strings"],
        complexity_time="O(mn)", complexity_space="O(mn)",
        description="Fewest single-character inserts, deletes and replacements.",
    ),

    "coin-change": AlgoInfo(
        key="coin-change", label="Coin Change", category=DP,
        fn=coin_change, pseudocode=_coin_pc, params=["coins", "amount"],
        tags=["1d-table", "optimisation"],
        complexity_time="O(n·amount)", complexity_space="O(amount)",
        description="Fewest coins summing to an amount, unlimited supply of each coin.",
    ),

    "matrix-chain": AlgoInfo(
        key="matrix-chain", label="Matrix Chain Multiplication", category=DP,
        fn=matrix_chain, pseudocode=_mcm_pc, params=["dimensions"],
        tags=["2d-table", "interval"],
        complexity_time="O(n³)", complexity_space="O(n²)",
        description="Cheapest parenthesisation of a chain of matrix products.",
    ),

    "lis": AlgoInfo(
        key="lis", label="Longest Increasing Subsequence", category=DP,
        fn=longest_increasing_subsequence, pseudocode=_lis_pc, params=["array"],
        tags=["1d-table"],
        complexity_time="O(n²)", complexity_space="O(n)",
        description="Longest strictly increasing subsequence.",
    ),

    "rod-cutting": AlgoInfo(
        key="rod-cutting", label="Rod Cutting", category=DP,
        fn=rod_cutting, pseudocode=_rod_pc, params=["prices", "length"],
        tags=["1d-table", "optimisation"],
        complexity_time="O(n²)", complexity_space="O(n)",
        description="Best revenue from cutting a rod into priced pieces.",
    ),

    "subset-sum": AlgoInfo(
        key="subset-sum", label="Subset Sum", category=DP,
        fn=subset_sum, pseudocode=_subset_pc, params=["array", "target"],
        tags=["2d-table", "decision"],
        complexity_time="O(n·target)", complexity_space="O(n·target)",
        description="Whether some subset of the numbers adds up to the target.",
    ),

    "palindrome-partitioning": AlgoInfo(
        key="palindrome-partitioning", label="Palindrome Partitioning", category=DP,
        fn=palindrome_partitioning, pseudocode=_palin_pc, params=["text"],
        tags=["2d-table", "strings", "interval"],
        complexity_time="O(n²)", complexity_space="O(n²)",
        description="Fewest cuts splitting a string into palindromes.",
    ),

    # -- string --
    "naive-search": AlgoInfo(
        key="naive-search", label="Naive Pattern Matching", category=STRING,
        fn=naive_search, pseudocode=_naive_pc, params=_PATTERN,
        tags=["exact-match"],
        complexity_time="O(nm)", complexity_space="O(1)",
        description="Tries every alignment, comparing character by character.",
    ),

    "kmp": AlgoInfo(
        key="kmp", label="Knuth-Morris-Pratt (KMP)", category=STRING,
        fn=kmp_search, pseudocode=_kmp_pc, params=_PATTERN,
        tags=["exact-match", "prefix-function"],
        complexity_time="O(n + m)", complexity_space="O(m)",
        description="Never re-reads text characters, thanks to the prefix (LPS) table.",
    ),

    "rabin-karp": AlgoInfo(
        key="rabin-karp", label="Rabin-Karp Algorithm", category=STRING,
        fn=rabin_karp, pseudocode=_rk_pc, params=_PATTERN,
        tags=["exact-match", "hashing"],
        complexity_time="O(n + m) average, O(nm) worst", complexity_space="O(1)",
        description="Compares rolling window hashes, verifying characters on a hash hit.",
    ),

    "boyer-moore": AlgoInfo(
        key="boyer-moore", label="Boyer-Moore Algorithm", category=STRING,
        fn=boyer_moore, pseudocode=_bm_pc, params=_PATTERN,
        tags=["exact-match", "bad-character"],
        complexity_time="O(n/m) best, O(nm) worst", complexity_space="O(k)",
        description="Compares right to left and skips ahead on the bad-character rule.",
    ),

    "z-algorithm": AlgoInfo(
        key="z-algorithm", label="Z Algorithm", category=STRING,
        fn=z_search, pseudocode=_z_pc, params=_PATTERN,
        tags=["exact-match", "z-array"],
        complexity_time="O(n + m)", complexity_space="O(n + m)",
        description="Z-array of pattern + sentinel + text; Z[i] == m marks a match.",
    ),

    "manacher": AlgoInfo(
        key="manacher", label="Manacher's Algorithm", category=STRING,
        fn=manacher, pseudocode=_manacher_pc, params=["text"],
        tags=["palindrome"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Longest palindromic substring in linear time.",
    ),

    "aho-corasick": AlgoInfo(
        key="aho-corasick", label="Multi-Pattern Search", category=STRING,
        fn=multi_pattern_search, pseudocode=_multi_pc, params=["text", "patterns"],
        tags=["exact-match", "multi-pattern"],
        complexity_time="O(n·Σm)", complexity_space="O(k)",
        description="Finds every occurrence of several patterns, one naive scan per pattern.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    """Filter registry by category."""
    return [a for a in REGISTRY.values() if a.category == category]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def run_algorithm(key: str, *args: Any) -> List[Step]:
    """
    Run one algorithm to completion and return its full trace.

    Raises:
        KeyError: unknown algorithm key.
    """
    info = REGISTRY.get(key)
    if info is None:
        raise KeyError(f"Unknown algorithm: {key}")
    return list(info.fn(*args))


__all__ = [
    "AlgoInfo",
    "CATEGORIES",
    "SORTING",
    "SEARCHING",
    "GRAPH",
    "DP",
    "STRING",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "algorithms_by_tag",
    "run_algorithm",
]
