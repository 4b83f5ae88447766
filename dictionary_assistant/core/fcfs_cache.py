# fcfs_cache.py - bounded first-come-first-served result cache
#
# Evicts the entry inserted earliest among current occupants. Reads never
# reorder entries (this is not an LRU).

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

from .errors import ConstructionError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FcfsCache(Generic[K, V]):
    """
    Fixed-capacity, insertion-ordered cache shared by all request handlers.

    One lock guards the mapping and its insertion order together, so
    size() <= capacity holds under concurrent get/put.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConstructionError(f"cache capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._entries: "OrderedDict[K, V]" = OrderedDict()  # oldest first
        self._lock = threading.Lock()
        self._stats = {"hits": 0, "misses": 0, "evictions": 0}

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Cached value for `key`, or `default` on a miss.
        Only the hit/miss counters change; entries and their order do not.
        """
        with self._lock:
            if key in self._entries:
                self._stats["hits"] += 1
                return self._entries[key]
            self._stats["misses"] += 1
            return default

    def put(self, key: K, value: V) -> None:
        """
        Store `value`. An existing key is overwritten in place and keeps its
        position; a new key into a full cache evicts exactly one entry first.
        """
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                return
            if len(self._entries) >= self.capacity:
                oldest, _ = self._entries.popitem(last=False)
                self._stats["evictions"] += 1
                logger.debug("cache evict %r", oldest)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> List[K]:
        """Keys from oldest to newest insertion."""
        with self._lock:
            return list(self._entries)

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {**self._stats, "size": len(self._entries), "capacity": self.capacity}

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
