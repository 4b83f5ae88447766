"""
dictionary_assistant.core

The lookup engine behind the Dictionary Assistant.
Contains:
 - the character trie holding meanings and usages (TrieIndex)
 - the bounded first-come-first-served result cache (FcfsCache)
 - the query services wiring the two together (QueryService, StoreQueryService)
 - dataset loading and the exact-match record store
"""

from .errors import AutocompleteUnavailable, ConstructionError, DictionaryError, InvalidInput
from .fcfs_cache import FcfsCache
from .normalizer import normalize_word
from .query_service import QueryService, StoreQueryService
from .record_store import JsonRecordStore
from .trie import TrieIndex, TrieNode, WordEntry

__all__ = [
    "AutocompleteUnavailable",
    "ConstructionError",
    "DictionaryError",
    "InvalidInput",
    "FcfsCache",
    "normalize_word",
    "QueryService",
    "StoreQueryService",
    "JsonRecordStore",
    "TrieIndex",
    "TrieNode",
    "WordEntry",
]
