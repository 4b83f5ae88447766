# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "cache_capacity": 10,
    "dataset_path": os.path.join("data", "dictionary.json"),
    "mode": "trie",  # trie | store
    "max_suggestions": 10,
    "log_level": "INFO",
    "log_path": os.path.join("logs", "dictionary.log"),
    "metrics_path": "metrics.json",
}

MODES = ("trie", "store")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: expected a JSON object", self.path)
                return
            for key, val in loaded.items():
                try:
                    self._apply(key, val)
                except ValueError as e:
                    logger.warning("config %s: %s", self.path, e)
        elif self.autosave:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        return [(k, v) for k, v in self.data.items()]

    def set(self, key, val):
        """Coerce `val` to the option's type, validate it, then persist."""
        self._apply(key, val)
        if self.autosave:
            self.save()

    def _apply(self, key, val):
        if key not in DEFAULTS:
            raise ValueError(f"no such option: {key}")
        kind = type(DEFAULTS[key])
        try:
            val = kind(val)
        except (TypeError, ValueError):
            raise ValueError(f"{key} expects {kind.__name__}, got {val!r}")
        if key in ("cache_capacity", "max_suggestions") and val <= 0:
            raise ValueError(f"{key} must be positive")
        if key == "mode" and val not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        if key == "log_level":
            val = val.upper()
            if val not in LOG_LEVELS:
                raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        self.data[key] = val
