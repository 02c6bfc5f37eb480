"""
engine/
-------
Execution layer: validate input, run an algorithm to completion, keep
the result.

    from engine import Recorder, ExecutionStore, validate_input
"""

from engine.errors     import AlgoTraceError, ExecutionNotFoundError, InvalidInputError, UnknownAlgorithmError
from engine.recorder   import ExecutionResult, Recorder, RunMetrics
from engine.samples    import generate_sample_input
from engine.store      import ExecutionStore
from engine.validation import require_valid_input, validate_input

__all__ = [
    "AlgoTraceError",
    "ExecutionNotFoundError",
    "InvalidInputError",
    "UnknownAlgorithmError",
    "ExecutionResult",
    "Recorder",
    "RunMetrics",
    "generate_sample_input",
    "ExecutionStore",
    "require_valid_input",
    "validate_input",
]
