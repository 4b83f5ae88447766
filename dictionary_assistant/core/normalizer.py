# normalizer.py - the one canonical form for words, prefixes and cache keys

from __future__ import annotations

from typing import Any

from .errors import InvalidInput


def normalize_word(raw: Any) -> str:
    """
    Canonicalize a word or prefix: trim, collapse inner whitespace,
    upper-case the first character and lower-case the rest.

        normalize_word("  cAT ") -> "Cat"

    Used at insert time and before every cache/trie access. Applying it to
    its own output changes nothing, even when upper-casing the first
    character yields several ("ßa" -> "Ssa").
    """
    if not isinstance(raw, str):
        raise InvalidInput(f"expected text, got {type(raw).__name__}")
    s = " ".join(raw.split())
    if not s:
        raise InvalidInput("empty word")
    head = s[0].upper()
    return head[0] + (head[1:] + s[1:]).lower()
