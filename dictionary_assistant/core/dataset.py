# dataset.py - startup bulk dataset for the dictionary

# handles reading the word list the index is built from:
# - a JSON array of records, inserted in file order
# - accepted record shapes: canonical, store, and the legacy export keys
# - any malformed record aborts the load (ConstructionError), nothing is skipped

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .errors import ConstructionError, InvalidInput
from .normalizer import normalize_word

logger = logging.getLogger(__name__)

Record = Dict[str, str]

# field -> keys accepted for it, first match wins
_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "word": ("word", "Word"),
    "meaning": ("meaning", "Meaning"),
    "usage1": ("example1", "usage1", "usage_1", "Examples/0"),
    "usage2": ("example2", "usage2", "usage_2", "Examples/1"),
}


def _pick(raw: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in raw:
            return raw[key]
    return None


def parse_record(raw: Any, position: int = 0) -> Record:
    """
    Validate one dataset record and map it to {word, meaning, usage1, usage2}.
    The word comes back normalized; missing usages become "".
    """
    if not isinstance(raw, Mapping):
        raise ConstructionError(f"record {position}: expected an object, got {type(raw).__name__}")

    word = _pick(raw, "word")
    try:
        word = normalize_word(word)
    except InvalidInput as e:
        raise ConstructionError(f"record {position}: missing or invalid 'word' ({e})") from e

    meaning = _pick(raw, "meaning")
    if not isinstance(meaning, str) or not meaning.strip():
        raise ConstructionError(f"record {position} ({word!r}): missing 'meaning'")

    usages = []
    for field in ("usage1", "usage2"):
        val = _pick(raw, field)
        if val is None:
            val = ""
        if not isinstance(val, str):
            raise ConstructionError(f"record {position} ({word!r}): '{field}' must be text")
        usages.append(val)

    return {"word": word, "meaning": meaning, "usage1": usages[0], "usage2": usages[1]}


def parse_records(raw_records: Iterable[Any]) -> List[Record]:
    return [parse_record(raw, i) for i, raw in enumerate(raw_records)]


def load_records(path: str) -> List[Record]:
    """
    Load and validate the dataset at `path`.
    Returns:
        list of records in file order.
    Raises:
        ConstructionError when the file is missing/unreadable, is not a JSON
        array, or holds a malformed record.
    """
    if not os.path.exists(path):
        raise ConstructionError(f"dataset not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConstructionError(f"cannot read dataset {path}: {e}") from e

    if not isinstance(data, list):
        raise ConstructionError(f"dataset {path}: expected a JSON array of records")

    records = parse_records(data)
    logger.info("loaded %d dataset records from %s", len(records), path)
    return records
