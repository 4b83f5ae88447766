# trie.py
# Trie (prefix tree) holding a dictionary: every word-end node carries the
# word's meaning and two usage examples.
# Built once at startup from the dataset, then only read; lookups are O(k)
# in word length and autocomplete walks just the prefix's subtree.

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .normalizer import normalize_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordEntry:
    """Payload stored on a terminal node."""
    meaning: str
    usage1: str = ""
    usage2: str = ""


class TrieNode:
    """
    A single node in the Trie.
    key: the character this node stands for (None for the root)
    children: char -> TrieNode, iterated in insertion order
    entry: WordEntry when a word ends here, else None
    parent: weak back-reference, only used by get_word()
    """

    __slots__ = ("key", "children", "entry", "_parent", "__weakref__")

    def __init__(self, key: Optional[str] = None, parent: Optional[TrieNode] = None) -> None:
        self.key = key
        self.children: Dict[str, TrieNode] = {}
        self.entry: Optional[WordEntry] = None
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional[TrieNode]:
        return self._parent() if self._parent is not None else None

    @property
    def is_terminal(self) -> bool:
        return self.entry is not None

    def get_word(self) -> str:
        """Rebuild the word ending at this node by walking up the parents."""
        chars: List[str] = []
        node: Optional[TrieNode] = self
        while node is not None and node.key is not None:
            chars.append(node.key)
            node = node.parent
        return "".join(reversed(chars))


class TrieIndex:
    """
    Character trie storing per-word meaning/usages.
    Used by the QueryService for:
     - exact meaning lookup
     - prefix autocomplete
    All public methods normalize their input with normalize_word(), so "cat",
    "CAT" and "Cat" all address the same path.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._count = 0

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> TrieIndex:
        """
        Build an index from already validated records
        ({word, meaning, usage1, usage2}) in order; later duplicates win.
        """
        index = cls()
        for rec in records:
            index.insert(rec["word"], rec["meaning"], rec.get("usage1", ""), rec.get("usage2", ""))
        logger.info("trie built: %d words", len(index))
        return index

    # insertion -----------------------------------------------------
    def insert(self, word: str, meaning: str, usage1: str = "", usage2: str = "") -> None:
        """
        Insert (or overwrite) a word and its payload.
        Creates one child node per missing character.
        """
        node = self._root
        for ch in normalize_word(word):
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch, parent=node)
                node.children[ch] = child
            node = child
        if node.entry is None:
            self._count += 1
        node.entry = WordEntry(meaning, usage1, usage2)

    # search/traversal ---------------------------------------------------------
    def _walk(self, path: str) -> Optional[TrieNode]:
        node = self._root
        for ch in path:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def lookup_meaning(self, word: str) -> Optional[WordEntry]:
        """Payload for `word`, or None if the path breaks or is not a word end."""
        node = self._walk(normalize_word(word))
        if node is None:
            return None
        return node.entry

    def contains_word(self, word: str) -> bool:
        node = self._walk(normalize_word(word))
        return node is not None and node.is_terminal

    def autocomplete(self, prefix: str) -> List[str]:
        """
        Return every stored word starting with `prefix`.
        Order is deterministic: DFS pre-order, children in insertion order,
        each found word placed in front of the ones found before it.
        """
        node = self._walk(normalize_word(prefix))
        if node is None:
            return []
        out: List[str] = []
        self._collect(node, out)
        out.reverse()
        return out

    def words(self) -> List[str]:
        """Every stored word, in the same order autocomplete would give."""
        out: List[str] = []
        self._collect(self._root, out)
        out.reverse()
        return out

    # internal recursive collector ---------------------------------------------------------
    def _collect(self, node: TrieNode, results: List[str]) -> None:
        """DFS appending words in discovery order."""
        if node.is_terminal:
            results.append(node.get_word())
        for child in node.children.values():
            self._collect(child, results)

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        return self._count

    def __contains__(self, word: object) -> bool:
        """Membership check; invalid input is simply not a member."""
        if not isinstance(word, str) or not word.strip():
            return False
        return self.contains_word(word)
