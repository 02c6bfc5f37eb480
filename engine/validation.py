"""
validation.py — Input Validation
================================
Checks the shape of an execution request's `input` dict before any
algorithm runs, and maps a valid dict onto the generator's positional
arguments.

    errors = validate_input("binary-search", {"array": [1, 3, 5], "target": 3})
    args   = extract_args(get_algorithm("binary-search"), payload)

validate_input returns a list of human-readable problems (empty when the
input is valid); require_valid_input raises InvalidInputError instead.
"""

from typing import Any, Callable, Dict, List

from algorithms import DP, GRAPH, SEARCHING, SORTING, STRING, AlgoInfo, get_algorithm
from engine.errors import InvalidInputError, UnknownAlgorithmError


# alternative spellings accepted for a parameter
PARAM_ALIASES: Dict[str, tuple] = {
    "str1": ("string1",),
    "str2": ("string2",),
}

NEEDS_START_NODE = {"bfs", "dfs", "dijkstra", "bellman-ford", "prim"}


# ---------------------------------------------------------------------------
# Primitive checks
# ---------------------------------------------------------------------------
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_sorted(values: List[float]) -> bool:
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))


def _number_list(data: dict, key: str, errors: List[str]) -> bool:
    values = data.get(key)
    if not isinstance(values, list):
        errors.append(f"Input must have an {key} property" if key[0] in "aeiou" else f"Input must have a {key} property")
        return False
    if not all(_is_number(v) for v in values):
        errors.append(f"{key.capitalize()} must contain only numbers")
        return False
    return True


def _int_list(data: dict, key: str, errors: List[str], minimum: int = 0) -> bool:
    values = data.get(key)
    if not isinstance(values, list) or not all(_is_int(v) for v in values):
        errors.append(f"{key.capitalize()} must be a list of integers")
        return False
    if any(v < minimum for v in values):
        errors.append(f"{key.capitalize()} must contain integers >= {minimum}")
        return False
    return True


def _int_field(data: dict, key: str, errors: List[str], minimum: int = 0) -> bool:
    value = data.get(key)
    if not _is_int(value):
        errors.append(f"Input must have an integer {key}")
        return False
    if value < minimum:
        errors.append(f"{key.capitalize()} must be >= {minimum}")
        return False
    return True


def _string_field(data: dict, key: str, errors: List[str], allow_empty: bool = False) -> bool:
    value = data.get(key)
    if not isinstance(value, str) or (not allow_empty and not value):
        errors.append(f"Input must have a {key} string")
        return False
    return True


# ---------------------------------------------------------------------------
# Per-category checks
# ---------------------------------------------------------------------------
def _check_sorting(key: str, data: dict, errors: List[str]) -> None:
    if not _number_list(data, "array", errors):
        return
    array = data["array"]
    if key == "radix-sort" and not all(_is_int(v) and v > 0 for v in array):
        errors.append("Radix sort requires positive integers")
    if key == "counting-sort" and not all(_is_int(v) for v in array):
        errors.append("Counting sort requires integers")


def _check_searching(key: str, data: dict, errors: List[str]) -> None:
    has_array = _number_list(data, "array", errors)
    if "target" not in data:
        errors.append("Input must have a target value")
    elif not _is_number(data["target"]):
        errors.append("Target must be a number")
    if has_array and key != "linear-search" and not _is_sorted(data["array"]):
        errors.append("Array must be sorted for this search algorithm")


def _check_graph(key: str, data: dict, errors: List[str]) -> None:
    nodes, edges = data.get("nodes"), data.get("edges")
    if not isinstance(nodes, list):
        errors.append("Input must have a nodes array")
    if not isinstance(edges, list):
        errors.append("Input must have an edges array")
    if errors:
        return

    ids = set()
    for node in nodes:
        if not isinstance(node, dict) or "id" not in node:
            errors.append("Every node must be an object with an id")
            return
        node_id = str(node["id"])
        if node_id in ids:
            errors.append(f"Duplicate node id: {node_id}")
        ids.add(node_id)

    for edge in edges:
        if not isinstance(edge, dict) or "source" not in edge or "target" not in edge:
            errors.append("Every edge must be an object with source and target")
            return
        for end in (edge["source"], edge["target"]):
            if str(end) not in ids:
                errors.append(f"Edge {edge['source']}-{edge['target']} references unknown node '{end}'")
        if "weight" in edge and not _is_number(edge["weight"]):
            errors.append(f"Edge {edge['source']}-{edge['target']} has a non-numeric weight")
        elif key == "dijkstra" and edge.get("weight", 1) < 0:
            errors.append("Dijkstra's algorithm requires non-negative edge weights")

    if key in NEEDS_START_NODE:
        start = data.get("startNode")
        if start is None or start == "":
            errors.append("Input must have a startNode property")
        elif str(start) not in ids:
            errors.append(f"Start node '{start}' is not in the graph")


def _check_dp(key: str, data: dict, errors: List[str]) -> None:
    if key == "fibonacci-dp":
        _int_field(data, "n", errors)
    elif key == "knapsack":
        ok = _int_list(data, "weights", errors)
        ok = _number_list(data, "values", errors) and ok
        _int_field(data, "capacity", errors)
        if ok and len(data["weights"]) != len(data["values"]):
            errors.append("Weights and values must have the same length")
    elif key in ("lcs", "edit-distance"):
        _string_field(data, "str1", errors, allow_empty=True)
        _string_field(data, "str2", errors, allow_empty=True)
    elif key == "coin-change":
        if _int_list(data, "coins", errors, minimum=1) and not data["coins"]:
            errors.append("Coins must not be empty")
        _int_field(data, "amount", errors)
    elif key == "matrix-chain":
        if _int_list(data, "dimensions", errors, minimum=1) and len(data["dimensions"]) < 2:
            errors.append("Dimensions must describe at least one matrix")
    elif key == "lis":
        _number_list(data, "array", errors)
    elif key == "rod-cutting":
        _number_list(data, "prices", errors)
        _int_field(data, "length", errors)
    elif key == "subset-sum":
        _int_list(data, "array", errors)
        _int_field(data, "target", errors)
    elif key == "palindrome-partitioning":
        _string_field(data, "text", errors, allow_empty=True)


def _check_string(key: str, data: dict, errors: List[str]) -> None:
    _string_field(data, "text", errors)
    if key == "manacher":
        return
    if key == "aho-corasick":
        patterns = data.get("patterns")
        if not isinstance(patterns, list) or not patterns or not all(isinstance(p, str) and p for p in patterns):
            errors.append("Input must have a non-empty patterns list of strings")
        return
    _string_field(data, "pattern", errors)


_CHECKS: Dict[str, Callable[[str, dict, List[str]], None]] = {
    SORTING:   _check_sorting,
    SEARCHING: _check_searching,
    GRAPH:     _check_graph,
    DP:        _check_dp,
    STRING:    _check_string,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def normalize_input(info: AlgoInfo, payload: Any) -> dict:
    """
    Accept a bare value for single-parameter algorithms
    ([5, 2, 4] for a sort, 10 for fibonacci) and fill in aliased keys.
    """
    if not isinstance(payload, dict):
        if len(info.params) == 1 and payload is not None:
            return {info.params[0]: payload}
        return {}
    data = dict(payload)
    for key, aliases in PARAM_ALIASES.items():
        if key in info.params and key not in data:
            for alias in aliases:
                if alias in data:
                    data[key] = data[alias]
                    break
    return data


def validate_input(algorithm_id: str, payload: Any) -> List[str]:
    """
    Returns:
        List of problems, empty when the input is valid.

    Raises:
        UnknownAlgorithmError: no algorithm is registered under algorithm_id.
    """
    info = get_algorithm(algorithm_id)
    if info is None:
        raise UnknownAlgorithmError(algorithm_id)
    if not isinstance(payload, dict) and len(info.params) > 1:
        return ["Input must be an object"]

    errors: List[str] = []
    _CHECKS[info.category](info.key, normalize_input(info, payload), errors)
    return errors


def require_valid_input(algorithm_id: str, payload: Any) -> None:
    errors = validate_input(algorithm_id, payload)
    if errors:
        raise InvalidInputError(f"Invalid input for {algorithm_id}", errors)


def extract_args(info: AlgoInfo, payload: Any) -> list:
    """Positional arguments for info.fn, in params order."""
    data = normalize_input(info, payload)
    args = [data.get(p) for p in info.params]
    if info.category == GRAPH and "startNode" in info.params:
        args[-1] = str(args[-1])
    return args
