# errors.py - error types raised by the dictionary core
#
# Not-found is a normal outcome (lookup_meaning returns None), so it has no
# exception here.


class DictionaryError(Exception):
    """Base class for every error the dictionary core raises."""


class InvalidInput(DictionaryError, ValueError):
    """Empty or non-text query rejected before any trie/cache access."""


class ConstructionError(DictionaryError):
    """Startup failure: bad cache capacity or a malformed dataset record."""


class AutocompleteUnavailable(DictionaryError):
    """Prefix search requested from a store-backed service (exact match only)."""
