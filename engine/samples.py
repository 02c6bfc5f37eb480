"""
samples.py — Sample Inputs
==========================
Ready-made `input` payloads for every registered algorithm, so a client
can run anything without building input by hand.  Arrays are random
(10 values in 1..100); everything else is a fixed textbook example.
"""

import copy
import random
from typing import Any, Dict, Optional

from algorithms import DP, GRAPH, SEARCHING, SORTING, STRING, get_algorithm
from engine.errors import UnknownAlgorithmError


SAMPLE_GRAPH: Dict[str, Any] = {
    "nodes": [
        {"id": "A", "x": 100, "y": 100},
        {"id": "B", "x": 200, "y": 50},
        {"id": "C", "x": 300, "y": 100},
        {"id": "D", "x": 200, "y": 150},
        {"id": "E", "x": 250, "y": 200},
    ],
    "edges": [
        {"source": "A", "target": "B", "weight": 4},
        {"source": "A", "target": "D", "weight": 2},
        {"source": "B", "target": "C", "weight": 3},
        {"source": "B", "target": "D", "weight": 1},
        {"source": "C", "target": "E", "weight": 5},
        {"source": "D", "target": "E", "weight": 3},
    ],
    "startNode": "A",
}

DP_SAMPLES: Dict[str, Dict[str, Any]] = {
    "fibonacci-dp":            {"n": 10},
    "knapsack":                {"weights": [2, 3, 4, 5], "values": [3, 4, 5, 6], "capacity": 8},
    "lcs":                     {"str1": "ABCDGH", "str2": "AEDFHR"},
    "edit-distance":           {"str1": "sunday", "str2": "saturday"},
    "coin-change":             {"coins": [1, 2, 5], "amount": 11},
    "matrix-chain":            {"dimensions": [10, 20, 30, 40, 30]},
    "lis":                     {"array": [10, 9, 2, 5, 3, 7, 101, 18]},
    "rod-cutting":             {"prices": [1, 5, 8, 9, 10, 17, 17, 20], "length": 8},
    "subset-sum":              {"array": [3, 34, 4, 12, 5, 2], "target": 9},
    "palindrome-partitioning": {"text": "ababbbabbababa"},
}

STRING_SAMPLES: Dict[str, Dict[str, Any]] = {
    "manacher":     {"text": "forgeeksskeegfor"},
    "aho-corasick": {"text": "ushers", "patterns": ["he", "she", "his", "hers"]},
}
DEFAULT_STRING_SAMPLE = {"text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB"}

ARRAY_LENGTH = 10
VALUE_RANGE  = (1, 100)


def _random_array(rng: random.Random) -> list:
    lo, hi = VALUE_RANGE
    return [rng.randint(lo, hi) for _ in range(ARRAY_LENGTH)]


def generate_sample_input(algorithm_id: str, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """
    Raises:
        UnknownAlgorithmError: no algorithm is registered under algorithm_id.
    """
    info = get_algorithm(algorithm_id)
    if info is None:
        raise UnknownAlgorithmError(algorithm_id)
    rng = rng or random.Random()

    if info.category == SORTING:
        return {"array": _random_array(rng)}
    if info.category == SEARCHING:
        array = sorted(_random_array(rng))
        return {"array": array, "target": rng.choice(array)}
    if info.category == GRAPH:
        return copy.deepcopy(SAMPLE_GRAPH)
    if info.category == DP:
        return copy.deepcopy(DP_SAMPLES[algorithm_id])
    if info.category == STRING:
        return copy.deepcopy(STRING_SAMPLES.get(algorithm_id, DEFAULT_STRING_SAMPLE))
    return {}
