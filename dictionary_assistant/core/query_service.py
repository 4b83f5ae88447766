# dictionary_assistant/core/query_service.py
"""
Query services: the two operations the outside world calls.

    lookup(word)    -> {"meaning", "usage1", "usage2"} | {"error": "word not found"}
    suggest(prefix) -> [word, ...]

QueryService answers from a TrieIndex behind an FcfsCache.
StoreQueryService answers exact lookups from a RecordStore (find_one) behind
the same cache; it has no prefix search.

Both normalize once with normalize_word() and use that form as the cache key
and as the index/store key. Negative results are cached too.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, cast

from .errors import AutocompleteUnavailable
from .fcfs_cache import FcfsCache
from .normalizer import normalize_word
from .protocols import (
    LookupResult,
    RecordStore,
    WordEntryLike,
    WordIndexProtocol,
    not_found,
)

logger = logging.getLogger(__name__)

_MISS = object()


def _from_entry(entry: Optional[WordEntryLike]) -> LookupResult:
    if entry is None:
        return not_found()
    return {"meaning": entry.meaning, "usage1": entry.usage1, "usage2": entry.usage2}


def _from_record(record: Optional[Mapping[str, Any]]) -> LookupResult:
    if not record:
        return not_found()
    return {
        "meaning": record["meaning"],
        "usage1": record.get("usage1") or "",
        "usage2": record.get("usage2") or "",
    }


class _CachedLookup(ABC):
    """Shared cache-first lookup path."""

    def __init__(self, cache: FcfsCache[str, LookupResult]) -> None:
        self.cache = cache

    @abstractmethod
    def _resolve(self, key: str) -> LookupResult:
        """Answer a cache miss for an already normalized key."""

    def lookup(self, raw_word: str) -> LookupResult:
        key = normalize_word(raw_word)
        cached = self.cache.get(key, _MISS)
        if cached is not _MISS:
            logger.debug("cache hit %r", key)
            return cast(LookupResult, dict(cached))
        logger.debug("cache miss %r", key)
        result = self._resolve(key)
        self.cache.put(key, result)
        return cast(LookupResult, dict(result))


class QueryService(_CachedLookup):
    """Trie-backed service: cached exact lookup plus uncached autocomplete."""

    def __init__(self, index: WordIndexProtocol, cache: FcfsCache[str, LookupResult]) -> None:
        super().__init__(cache)
        self.index = index

    def _resolve(self, key: str) -> LookupResult:
        return _from_entry(self.index.lookup_meaning(key))

    def suggest(self, raw_prefix: str) -> List[str]:
        """All stored words extending the prefix. Never touches the cache."""
        return self.index.autocomplete(normalize_word(raw_prefix))


class StoreQueryService(_CachedLookup):
    """Store-backed service: exact lookups only, one find_one() per cache miss."""

    def __init__(self, store: RecordStore, cache: FcfsCache[str, LookupResult]) -> None:
        super().__init__(cache)
        self.store = store

    def _resolve(self, key: str) -> LookupResult:
        return _from_record(self.store.find_one(key))

    def suggest(self, raw_prefix: str) -> List[str]:
        normalize_word(raw_prefix)
        raise AutocompleteUnavailable("prefix search needs the trie index (mode 'trie')")


__all__ = ["QueryService", "StoreQueryService"]
