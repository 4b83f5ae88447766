# record_store.py - exact-match record store for the store-backed mode
#
# Serves find_one(word) from records keyed by normalized word. It sits at the
# same boundary as a remote document store: no prefix search, one call per
# cache miss.

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

from .dataset import Record, load_records
from .normalizer import normalize_word

logger = logging.getLogger(__name__)


class JsonRecordStore:
    """Keyed record store built from dataset records (later duplicates win)."""

    def __init__(self, records: Iterable[Mapping[str, str]]) -> None:
        self._records: Dict[str, Record] = {}
        for rec in records:
            self._records[normalize_word(rec["word"])] = {
                "word": rec["word"],
                "meaning": rec["meaning"],
                "usage1": rec.get("usage1", ""),
                "usage2": rec.get("usage2", ""),
            }
        self.calls = 0

    @classmethod
    def from_file(cls, path: str) -> JsonRecordStore:
        store = cls(load_records(path))
        logger.info("record store ready: %d words", len(store))
        return store

    def find_one(self, word: str) -> Optional[Record]:
        self.calls += 1
        rec = self._records.get(normalize_word(word))
        return dict(rec) if rec is not None else None

    def __len__(self) -> int:
        return len(self._records)
