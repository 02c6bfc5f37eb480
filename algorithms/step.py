"""
step.py — Algorithm Step Snapshots
==================================
Every algorithm is a generator that yields Step objects.  A Step is a
frozen-in-time picture of one state transition:

    • what kind of transition it was   (`type`, a closed tag per family)
    • why it happened                   (`description`)
    • a full copy of the structure the algorithm is working on
      (array / table / nodes + edges / text + match list)
    • which pseudocode line is executing (`pseudocode_line`)
    • the final answer, on the terminal step only (`result`)

Design decisions:
  - One frozen dataclass per algorithm family (SortStep, SearchStep,
    GraphStep, DPStep, StringStep).  Each declares exactly the optional
    fields that family may set, so a misspelt annotation fails at the
    construction site instead of silently reaching the client.
  - `type` is validated against the family's STEP_TYPES in __post_init__.
  - Snapshots are COPIES.  Builders hold a reference to the live working
    structure and freeze it (tuples, fresh dicts, Node / Edge copies) at
    the moment of emission.  Mutating the working structure afterwards
    can never change a step that was already yielded.
"""

import copy
import math
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Sequence, Tuple


# ---------------------------------------------------------------------------
# Freezing helpers
# ---------------------------------------------------------------------------
def freeze(value: Any) -> Any:
    """Deep-copy `value` into an immutable-where-possible snapshot."""
    if isinstance(value, (list, tuple, range)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(value))
    if isinstance(value, dict):
        return {k: freeze(v) for k, v in value.items()}
    if hasattr(value, "copy") and hasattr(value, "to_dict"):
        return value.copy()          # Node / Edge
    return value


def finite_or_none(value: Any) -> Any:
    """∞ / NaN have no JSON spelling; snapshots carry None instead."""
    if isinstance(value, float) and (math.isinf(value) or math.isnan(value)):
        return None
    return value


def _jsonable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return finite_or_none(value)


# ---------------------------------------------------------------------------
# Base step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        type            : Transition tag, e.g. "compare", "swap", "relax".
        description     : Human-readable "why" text, built from the current state.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        is_final        : True on the very last step of the trace.
        result          : Canonical answer, set on the terminal step only.
    """

    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset()

    step_number:     int  = 0
    type:            str  = ""
    description:     str  = ""
    pseudocode_line: int  = 0
    is_final:        bool = False
    result:          Any  = None

    def __post_init__(self):
        if self.STEP_TYPES and self.type not in self.STEP_TYPES:
            raise ValueError(f"{type(self).__name__} does not allow step type {self.type!r}")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe dict: tuples become lists, ∞ becomes None."""
        return {f.name: _jsonable(getattr(self, f.name)) for f in fields(self)}


# ---------------------------------------------------------------------------
# Family variants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SortStep(Step):
    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        "compare", "swap", "sorted", "complete",
        "pivot", "divide", "split", "merge", "merged",
        "build-heap", "heap-built",
        "select", "shift", "insert", "find-min", "new-min",
        "pass-start", "distribute", "collect", "pass-complete",
        "count-start", "count", "prefix-sum", "place",
        "distribute-start", "sort-bucket",
        "gap-start",
    })

    array:          Tuple[float, ...]               = ()
    sorted_indices: Tuple[int, ...]                 = ()
    comparing:      Tuple[int, ...]                 = ()
    swapping:       Tuple[int, ...]                 = ()
    highlighted:    Tuple[int, ...]                 = ()
    pivot:          Optional[int]                   = None
    segment:        Optional[Tuple[int, int]]       = None
    auxiliary:      Tuple[Optional[float], ...]     = ()
    buckets:        Tuple[Tuple[float, ...], ...]   = ()
    gap:            Optional[int]                   = None


@dataclass(frozen=True)
class SearchStep(Step):
    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        "start", "compare", "found", "not-found", "complete",
        "calculate-mid", "move-left", "move-right",
        "jump", "block-found", "linear-search",
        "single-element", "interpolate",
        "expand", "range-found", "binary-compare",
        "calculate-mids", "search-left", "search-right", "search-middle",
        "fibonacci-init", "check",
    })

    array:         Tuple[float, ...]          = ()
    target:        Optional[float]            = None
    current_index: Optional[int]              = None
    comparing:     Tuple[int, ...]            = ()
    highlighted:   Tuple[int, ...]            = ()
    bounds:        Optional[Tuple[int, int]]  = None
    found:         Optional[bool]             = None
    found_index:   Optional[int]              = None
    jump_size:     Optional[int]              = None
    block:         Optional[Tuple[int, int]]  = None


@dataclass(frozen=True)
class GraphStep(Step):
    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        "start", "visit", "complete",
        "enqueue", "push", "pop-visited",
        "check-neighbor", "update-distance",
        "iteration", "check-edge", "relax", "negative-cycle",
        "add-edge", "skip-edge",
        "update",
    })

    nodes:        Tuple[Any, ...]                            = ()
    edges:        Tuple[Any, ...]                            = ()
    current_node: Optional[str]                              = None
    queue:        Tuple[str, ...]                            = ()
    stack:        Tuple[str, ...]                            = ()
    visited:      Tuple[str, ...]                            = ()
    distances:    Dict[str, Optional[float]]                 = None
    mst_edges:    Tuple[Any, ...]                            = ()
    mst_cost:     Optional[float]                            = None
    matrix:       Tuple[Tuple[Optional[float], ...], ...]    = ()
    iteration:    Optional[int]                              = None


@dataclass(frozen=True)
class DPStep(Step):
    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        "start", "complete",
        "compute", "compare", "skip", "backtrack",
        "match", "no-match", "edit",
        "candidate", "fill", "impossible",
        "decide",
        "palindrome-check", "palindrome", "partition",
    })

    table:             Tuple[Tuple[Any, ...], ...]   = ()
    current_cell:      Optional[Tuple[int, int]]     = None
    highlighted_cells: Tuple[Tuple[int, int], ...]   = ()
    sequence:          Tuple[Any, ...]               = ()
    operation:         Optional[str]                 = None
    candidate:         Optional[float]               = None


@dataclass(frozen=True)
class StringStep(Step):
    STEP_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        "start", "found", "complete",
        "start-match", "match-char", "mismatch",
        "lps-start", "lps-match", "lps-fallback", "lps-no-match", "lps-complete",
        "compare", "match", "mismatch-shift", "mismatch-advance",
        "hash-init", "compare-hash", "spurious-hit", "roll-hash",
        "align",
        "compute-z", "copy-z", "extend-z",
        "expand", "update-center",
        "pattern-start",
    })

    text:          str                        = ""
    pattern:       str                        = ""
    current_index: Optional[int]              = None
    pattern_index: Optional[int]              = None
    highlighted:   Tuple[int, ...]            = ()
    matches:       Tuple[int, ...]            = ()
    table:         Tuple[Any, ...]            = ()
    window:        Optional[Tuple[int, int]]  = None
    pattern_hash:  Optional[int]              = None
    window_hash:   Optional[int]              = None


# ---------------------------------------------------------------------------
# Builders — mutable scratch-pads that stamp out numbered, frozen Steps
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Holds references to the live working structures of one run and
    numbers the steps it builds.

    Usage inside an algorithm generator:
        sb = SortStepBuilder(arr)
        yield sb.build("compare", f"Comparing {arr[0]} and {arr[1]}", line=3, comparing=(0, 1))
        ...
        yield sb.complete("Array is now fully sorted!", result=arr, line=7)
    """

    step_class: ClassVar[type] = Step

    def __init__(self):
        self.step_no = 0

    def snapshot(self) -> Dict[str, Any]:
        """Family-specific copy of the live structures."""
        return {}

    def build(self, type: str, description: str, line: int = 0, **annotations: Any) -> Step:
        values = self.snapshot()
        for key, value in annotations.items():
            values[key] = copy.deepcopy(value) if key == "result" else freeze(value)
        step = self.step_class(
            step_number=self.step_no,
            type=type,
            description=description,
            pseudocode_line=line,
            **values,
        )
        self.step_no += 1
        return step

    def complete(self, description: str, result: Any, line: int = 0, **annotations: Any) -> Step:
        return self.build("complete", description, line=line, is_final=True, result=result, **annotations)


class SortStepBuilder(StepBuilder):
    step_class = SortStep

    def __init__(self, array: List[float]):
        super().__init__()
        self.array = array
        self.sorted: set = set()

    def snapshot(self) -> Dict[str, Any]:
        return {"array": tuple(self.array), "sorted_indices": tuple(sorted(self.sorted))}

    def mark_sorted(self, *indices: int) -> None:
        self.sorted.update(indices)

    def mark_all_sorted(self) -> None:
        self.sorted.update(range(len(self.array)))


class SearchStepBuilder(StepBuilder):
    step_class = SearchStep

    def __init__(self, array: Sequence[float], target: float):
        super().__init__()
        self.array  = array
        self.target = target

    def snapshot(self) -> Dict[str, Any]:
        return {"array": tuple(self.array), "target": self.target}

    def found(self, index: int, line: int = 0) -> List[Step]:
        """The `found` step followed by the terminal `complete` step."""
        return [
            self.build(
                "found",
                f"Target {self.target} found at index {index}!",
                line=line,
                found=True,
                found_index=index,
                highlighted=(index,),
            ),
            self.complete(
                f"Search finished: {self.target} is at index {index}",
                result={"found": True, "index": index},
                line=line,
                found=True,
                found_index=index,
            ),
        ]

    def not_found(self, reason: str = "", line: int = 0) -> List[Step]:
        why = reason or f"Target {self.target} not found in the array"
        return [
            self.build("not-found", why, line=line, found=False),
            self.complete(
                f"Search finished: {self.target} is not in the array",
                result={"found": False, "index": -1},
                line=line,
                found=False,
            ),
        ]


class GraphStepBuilder(StepBuilder):
    """
    Snapshots every node and edge of the working Graph.  `processing` and
    `highlight` apply to the snapshot copies only, so per-step emphasis
    never leaks into the working state.
    """

    step_class = GraphStep

    def __init__(self, graph):
        super().__init__()
        self.graph = graph

    def snapshot(self) -> Dict[str, Any]:
        return {}

    def build(
        self,
        type: str,
        description: str,
        line: int = 0,
        processing: Sequence[str] = (),
        highlight: Sequence[Any] = (),
        **annotations: Any,
    ) -> Step:
        hot_nodes = set(processing)
        hot_edges = {e.id for e in highlight}
        nodes = tuple(n.copy(processing=n.id in hot_nodes) for n in self.graph.nodes.values())
        edges = tuple(e.copy(highlighted=e.id in hot_edges) for e in self.graph.edges.values())
        return super().build(type, description, line=line, nodes=nodes, edges=edges, **annotations)


class DPStepBuilder(StepBuilder):
    """`table` may be 1-D or 2-D; 1-D tables are snapshotted as a single row."""

    step_class = DPStep

    def __init__(self, table: List[Any]):
        super().__init__()
        self.table = table

    def snapshot(self) -> Dict[str, Any]:
        if self.table and isinstance(self.table[0], list):
            rows = self.table
        else:
            rows = [self.table]
        return {"table": tuple(tuple(finite_or_none(v) for v in row) for row in rows)}


class StringStepBuilder(StepBuilder):
    step_class = StringStep

    def __init__(self, text: str, pattern: str, table: Optional[List[Any]] = None):
        super().__init__()
        self.text    = text
        self.pattern = pattern
        self.table   = table
        self.matches: List[int] = []

    def snapshot(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "text":    self.text,
            "pattern": self.pattern,
            "matches": tuple(sorted(self.matches)),
        }
        if self.table is not None:
            values["table"] = tuple(self.table)
        return values
