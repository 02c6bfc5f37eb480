"""
store.py — Execution Store
==========================
Keeps finished executions so clients can fetch them again by id.

Lifetime policy:
  - at most `max_entries` executions; the oldest is evicted first
  - entries older than `ttl_seconds` are purged on every access
    (None disables either limit)

The store is the only structure shared between requests, so every
public method holds the lock.
"""

import logging
import threading
import time
import uuid
from collections import OrderedDict
from typing import Any, Callable, Optional, Tuple


logger = logging.getLogger(__name__)


class ExecutionStore:
    """
    Attributes:
        max_entries : Capacity, or None for unbounded.
        ttl_seconds : Entry lifetime, or None to keep entries forever.
    """

    def __init__(
        self,
        max_entries: Optional[int] = 1000,
        ttl_seconds: Optional[float] = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock      = clock
        self._entries: "OrderedDict[str, Tuple[float, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create(self, result: Any) -> str:
        """Store `result` under a fresh id and return the id."""
        execution_id = str(uuid.uuid4())
        if hasattr(result, "id"):
            result.id = execution_id
        with self._lock:
            self._purge_expired()
            self._entries[execution_id] = (self._clock(), result)
            while self.max_entries is not None and len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted execution %s (store full)", evicted)
        return execution_id

    def get(self, execution_id: str) -> Optional[Any]:
        with self._lock:
            self._purge_expired()
            entry = self._entries.get(execution_id)
        return entry[1] if entry else None

    def delete(self, execution_id: str) -> bool:
        with self._lock:
            self._purge_expired()
            return self._entries.pop(execution_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._entries)

    def __contains__(self, execution_id: str) -> bool:
        return self.get(execution_id) is not None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _purge_expired(self) -> None:
        if self.ttl_seconds is None:
            return
        cutoff = self._clock() - self.ttl_seconds
        # insertion order == age order, so stop at the first live entry
        while self._entries:
            oldest_id, (created, _) = next(iter(self._entries.items()))
            if created > cutoff:
                break
            del self._entries[oldest_id]
            logger.debug("Expired execution %s", oldest_id)
