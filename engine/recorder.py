"""
recorder.py — Execution Recorder & Metrics
==========================================
Runs one algorithm to completion, records every Step, truncates the
trace to the step budget, computes the run metrics, and files the
result in an ExecutionStore.

Usage:
    rec = Recorder(store=ExecutionStore(), max_steps=5000)
    result = rec.run("dijkstra", {"nodes": [...], "edges": [...], "startNode": "A"})
    result.metrics.total_steps       # after truncation
    result.to_dict()                 # JSON payload for the HTTP layer

The algorithm always runs fully; truncation only trims what is returned,
so `output` is the real answer even when the trace is cut short.
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import get_algorithm
from algorithms.step import Step
from engine.errors import InvalidInputError, UnknownAlgorithmError
from engine.store import ExecutionStore
from engine.validation import extract_args, require_valid_input


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    category:        str   = ""
    total_steps:     int   = 0          # steps returned (after truncation)
    raw_steps:       int   = 0          # steps the algorithm produced
    truncated:       bool  = False
    step_counts:     Dict[str, int] = field(default_factory=dict)   # per type, full trace
    final_step_type: str   = ""         # "complete", or "negative-cycle"
    wall_time_ms:    float = 0.0        # wall-clock time to run to completion

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithmId":   self.algo_key,
            "algorithmName": self.algo_label,
            "category":      self.category,
            "totalSteps":    self.total_steps,
            "rawSteps":      self.raw_steps,
            "truncated":     self.truncated,
            "stepCounts":    dict(self.step_counts),
            "finalStepType": self.final_step_type,
            "wallTimeMs":    self.wall_time_ms,
        }


# ---------------------------------------------------------------------------
# ExecutionResult — one stored run
# ---------------------------------------------------------------------------
@dataclass
class ExecutionResult:
    algorithm_id: str
    steps:        List[Step]
    output:       Any
    metrics:      RunMetrics
    id:           str = ""

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":            self.id,
            "algorithmId":   self.algorithm_id,
            "steps":         [s.to_dict() for s in self.steps],
            "output":        _output_json(self.output),
            "executionTime": self.metrics.wall_time_ms,
            "totalSteps":    self.total_steps,
            "truncated":     self.metrics.truncated,
            "metrics":       self.metrics.to_dict(),
        }


def _output_json(output: Any) -> Any:
    # reuse the step serialiser for nested lists / dicts / ∞
    return Step(result=output).to_dict()["result"]


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        store     : Where finished executions are kept (None = not stored).
        max_steps : Default step budget when the request sets none (None = unlimited).
    """

    def __init__(self, store: Optional[ExecutionStore] = None, max_steps: Optional[int] = None):
        self.store     = store
        self.max_steps = max_steps

    def run(self, algorithm_id: str, payload: Any, options: Optional[Dict[str, Any]] = None) -> ExecutionResult:
        """
        Validate, run to completion, truncate, measure, store.

        Raises:
            UnknownAlgorithmError: algorithm_id is not registered.
            InvalidInputError:     payload or options failed validation.
        """
        info = get_algorithm(algorithm_id)
        if info is None:
            raise UnknownAlgorithmError(algorithm_id)
        require_valid_input(algorithm_id, payload)
        budget = self._step_budget(options or {})

        logger.debug("Running %s", algorithm_id)
        started = time.monotonic()
        try:
            steps = list(info.fn(*extract_args(info, payload)))
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
        wall_ms = (time.monotonic() - started) * 1000

        last = steps[-1] if steps else None
        kept = steps if budget is None else steps[:budget]
        if len(kept) < len(steps):
            logger.info("Truncated %s trace from %d to %d steps", algorithm_id, len(steps), len(kept))

        metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            category=info.category,
            total_steps=len(kept),
            raw_steps=len(steps),
            truncated=len(kept) < len(steps),
            step_counts=dict(Counter(s.type for s in steps)),
            final_step_type=last.type if last else "",
            wall_time_ms=round(wall_ms, 2),
        )
        result = ExecutionResult(
            algorithm_id=algorithm_id,
            steps=kept,
            output=last.result if last else None,
            metrics=metrics,
        )
        if self.store is not None:
            self.store.create(result)

        logger.debug("Finished %s: %d steps in %.2f ms", algorithm_id, len(steps), wall_ms)
        return result

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _step_budget(self, options: Dict[str, Any]) -> Optional[int]:
        requested = options.get("maxSteps")
        if requested is None:
            return self.max_steps
        if not isinstance(requested, int) or isinstance(requested, bool) or requested < 1:
            raise InvalidInputError("maxSteps must be a positive integer")
        return requested
