# tests/test_dataset.py
# dataset loading: record shapes, validation, order, record store

import json
from pathlib import Path

import pytest

from dictionary_assistant.core.dataset import load_records, parse_record
from dictionary_assistant.core.errors import ConstructionError
from dictionary_assistant.core.record_store import JsonRecordStore
from dictionary_assistant.core.trie import TrieIndex


def write(tmp_path, data, name="dict.json"):
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return str(p)


def test_canonical_shape(tmp_path):
    path = write(tmp_path, [{"word": "Cat", "meaning": "a feline", "example1": "The cat sat.", "example2": ""}])
    assert load_records(path) == [{"word": "Cat", "meaning": "a feline", "usage1": "The cat sat.", "usage2": ""}]


def test_export_shape():
    rec = parse_record({"Word": "apple", "Meaning": "a fruit", "Examples/0": "u1", "Examples/1": "u2"})
    assert rec == {"word": "Apple", "meaning": "a fruit", "usage1": "u1", "usage2": "u2"}


def test_store_shape_and_missing_examples():
    rec = parse_record({"word": "dog", "meaning": "a canine", "usage1": "Woof."})
    assert rec == {"word": "Dog", "meaning": "a canine", "usage1": "Woof.", "usage2": ""}


@pytest.mark.parametrize("raw", [
    {"meaning": "no word"},
    {"word": "", "meaning": "blank word"},
    {"word": "cat"},
    {"word": "cat", "meaning": "   "},
    {"word": "cat", "meaning": "ok", "example1": 5},
    ["cat", "a feline"],
])
def test_bad_records_abort(raw):
    with pytest.raises(ConstructionError):
        parse_record(raw)


def test_bad_record_position_reported(tmp_path):
    path = write(tmp_path, [{"word": "a", "meaning": "x"}, {"word": "b"}])
    with pytest.raises(ConstructionError, match="record 1"):
        load_records(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConstructionError):
        load_records(str(tmp_path / "nope.json"))


def test_not_an_array(tmp_path):
    with pytest.raises(ConstructionError):
        load_records(write(tmp_path, {"word": "cat"}))


def test_broken_json(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text("[{", encoding="utf-8")
    with pytest.raises(ConstructionError):
        load_records(str(p))


def test_later_duplicates_overwrite(tmp_path):
    path = write(tmp_path, [
        {"word": "cat", "meaning": "old"},
        {"word": "Cat", "meaning": "new"},
    ])
    records = load_records(path)
    assert TrieIndex.from_records(records).lookup_meaning("cat").meaning == "new"
    assert JsonRecordStore(records).find_one("CAT")["meaning"] == "new"


def test_record_store_find_one(tmp_path):
    store = JsonRecordStore.from_file(write(tmp_path, [{"word": "Cat", "meaning": "a feline"}]))
    assert store.find_one("cat") == {"word": "Cat", "meaning": "a feline", "usage1": "", "usage2": ""}
    assert store.find_one("dog") is None
    assert store.calls == 2
    assert len(store) == 1


def test_bundled_dataset_loads():
    records = load_records(str(Path(__file__).resolve().parent.parent / "data" / "dictionary.json"))
    index = TrieIndex.from_records(records)
    assert index.lookup_meaning("cat").usage1 == "The cat sat on the mat."
    assert index.autocomplete("ca") == ["Caterpillar", "Catalog", "Cat"]
