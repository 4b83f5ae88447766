# dictionary_assistant/core/protocols.py
"""
Typed payloads and collaborator interfaces shared by the core.

The query services depend on these Protocols rather than concrete classes so
tests can pass counting stubs in place of the trie or the record store.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Union, runtime_checkable
from typing_extensions import TypedDict


NOT_FOUND_MESSAGE = "word not found"


# Result payloads ------------------------------------------------------------

class MeaningResult(TypedDict):
    """Successful lookup: the stored meaning and up to two usage examples."""
    meaning: str
    usage1: str
    usage2: str


class NotFoundResult(TypedDict):
    """Negative lookup, cached just like a hit."""
    error: str


LookupResult = Union[MeaningResult, NotFoundResult]


def not_found() -> NotFoundResult:
    return {"error": NOT_FOUND_MESSAGE}


def is_not_found(result: Mapping[str, Any]) -> bool:
    return "error" in result


# Protocols ------------------------------------------------------------------

class WordEntryLike(Protocol):
    meaning: str
    usage1: str
    usage2: str


class WordIndexProtocol(Protocol):
    """What QueryService needs from the trie."""

    def lookup_meaning(self, word: str) -> Optional[WordEntryLike]:
        """Return the payload stored for `word`, or None when absent."""
        ...

    def autocomplete(self, prefix: str) -> List[str]:
        ...

    def __len__(self) -> int:
        """Number of distinct stored words."""
        ...


@runtime_checkable
class RecordStore(Protocol):
    """
    Exact-match key/value collaborator used instead of a trie in store mode.

    find_one(word) returns a record mapping with at least "meaning" (and
    optionally "usage1"/"usage2"), or None.
    """

    def find_one(self, word: str) -> Optional[Mapping[str, Any]]:
        ...
