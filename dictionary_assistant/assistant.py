# assistant.py
"""
DictionaryAssistant - application facade.

Purpose:
 - Build the lookup stack once at startup from Config:
     mode "trie"  -> dataset -> TrieIndex -> QueryService
     mode "store" -> dataset -> JsonRecordStore -> StoreQueryService
 - Simple public API for CLI/TUI/tests:
     lookup(word), suggest(prefix), stats()
 - Startup is blocking and must finish before any query is served;
   a bad dataset or capacity raises ConstructionError.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional, Union

from dictionary_assistant.core.dataset import load_records
from dictionary_assistant.core.fcfs_cache import FcfsCache
from dictionary_assistant.core.protocols import LookupResult
from dictionary_assistant.core.query_service import QueryService, StoreQueryService
from dictionary_assistant.core.record_store import JsonRecordStore
from dictionary_assistant.core.trie import TrieIndex
from dictionary_assistant.utils.config_manager import Config
from dictionary_assistant.utils.logger_utils import Log

logger = logging.getLogger(__name__)


class DictionaryAssistant:
    """Application facade exposing a small API
    Public API:
      - lookup(word: str) -> {"meaning", "usage1", "usage2"} | {"error": "word not found"}
      - suggest(prefix: str) -> List[str]
      - stats() -> Dict[str, Any]
    """

    def __init__(self, service: Union[QueryService, StoreQueryService], mode: str = "trie"):
        self.service = service
        self.mode = mode
        self._started_at = time.time()

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None) -> DictionaryAssistant:
        cfg = cfg or Config()
        mode = cfg.get("mode")
        logger.info("booting mode=%s dataset=%s", mode, cfg.get("dataset_path"))
        cache: FcfsCache[str, LookupResult] = FcfsCache(cfg.get("cache_capacity"))
        with Log.time_block(f"{mode} build"):
            records = load_records(cfg.get("dataset_path"))
            if mode == "store":
                service: Union[QueryService, StoreQueryService] = StoreQueryService(JsonRecordStore(records), cache)
            else:
                service = QueryService(TrieIndex.from_records(records), cache)
        return cls(service, mode=mode)

    # Public API ---------------------------------------------------------
    @property
    def supports_suggest(self) -> bool:
        return isinstance(self.service, QueryService)

    def lookup(self, word: str) -> LookupResult:
        return self.service.lookup(word)

    def suggest(self, prefix: str) -> List[str]:
        return self.service.suggest(prefix)

    def stats(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "mode": self.mode,
            "uptime_s": round(time.time() - self._started_at, 1),
        }
        if isinstance(self.service, QueryService):
            out["words"] = len(self.service.index)
        else:
            out["words"] = len(self.service.store)
        out["cache"] = self.service.cache.stats()
        return out
