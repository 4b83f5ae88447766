# tests/test_tui.py
# drive the textual app headless through its pilot

import asyncio

import pytest
from textual.widgets import Input

from dictionary_assistant.assistant import DictionaryAssistant
from dictionary_assistant.core.fcfs_cache import FcfsCache
from dictionary_assistant.core.query_service import QueryService, StoreQueryService
from dictionary_assistant.core.record_store import JsonRecordStore
from dictionary_assistant.core.trie import TrieIndex
from dictionary_assistant.tui_app import DictionaryTUI

RECORDS = [
    {"word": "Cat", "meaning": "a feline", "usage1": "The cat sat.", "usage2": ""},
    {"word": "Catalog", "meaning": "a list", "usage1": "", "usage2": ""},
]


@pytest.fixture
def assistant():
    return DictionaryAssistant(QueryService(TrieIndex.from_records(RECORDS), FcfsCache(4)))


def test_typing_updates_suggestions(assistant):
    async def scenario():
        app = DictionaryTUI(assistant)
        async with app.run_test() as pilot:
            await pilot.press("c", "a")
            await pilot.pause()
            return list(app.suggestions)

    assert asyncio.run(scenario()) == ["Catalog", "Cat"]


def test_enter_looks_up_word(assistant):
    async def scenario():
        app = DictionaryTUI(assistant)
        async with app.run_test() as pilot:
            await pilot.press("c", "a", "t", "enter")
            await pilot.pause()
            return app.last_result

    assert asyncio.run(scenario()) == {"meaning": "a feline", "usage1": "The cat sat.", "usage2": ""}


def test_tab_accepts_top_suggestion(assistant):
    async def scenario():
        app = DictionaryTUI(assistant)
        async with app.run_test() as pilot:
            await pilot.press("c", "a", "t", "a")
            await pilot.pause()
            await pilot.press("tab")
            await pilot.pause()
            return app.query_one(Input).value, app.last_result

    value, result = asyncio.run(scenario())
    assert value == "Catalog"
    assert result["meaning"] == "a list"


def test_store_mode_has_no_suggestions():
    store_assistant = DictionaryAssistant(
        StoreQueryService(JsonRecordStore(RECORDS), FcfsCache(2)), mode="store"
    )

    async def scenario():
        app = DictionaryTUI(store_assistant)
        async with app.run_test() as pilot:
            await pilot.press("c", "a", "t", "enter")
            await pilot.pause()
            return list(app.suggestions), app.last_result

    suggestions, result = asyncio.run(scenario())
    assert suggestions == []
    assert result["meaning"] == "a feline"
