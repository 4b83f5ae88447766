"""
Dictionary Assistant: word meanings and prefix autocomplete from an in-memory
trie, with a first-come-first-served cache in front of exact lookups.
"""

from dictionary_assistant.assistant import DictionaryAssistant

__all__ = ["DictionaryAssistant"]

__version__ = "0.1.0"
