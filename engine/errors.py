"""
errors.py — Engine Exceptions
=============================
Every error the engine raises on purpose derives from AlgoTraceError,
so the HTTP layer can map the whole family to status codes in one place.

    AlgoTraceError
    ├── UnknownAlgorithmError   (also a KeyError)
    ├── InvalidInputError       (also a ValueError, carries `errors`)
    └── ExecutionNotFoundError
"""

from typing import List, Optional


class AlgoTraceError(Exception):
    """Base class for engine errors."""


class UnknownAlgorithmError(AlgoTraceError, KeyError):
    def __init__(self, algorithm_id: str):
        super().__init__(algorithm_id)
        self.algorithm_id = algorithm_id

    def __str__(self) -> str:
        return f"Algorithm {self.algorithm_id} not found"


class InvalidInputError(AlgoTraceError, ValueError):
    """Input rejected before (or while) running an algorithm."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors else [message]


class ExecutionNotFoundError(AlgoTraceError):
    def __init__(self, execution_id: str):
        super().__init__(f"Execution {execution_id} not found")
        self.execution_id = execution_id
