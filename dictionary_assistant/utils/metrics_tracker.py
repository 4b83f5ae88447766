# metrics_tracker.py - running timing averages, persisted as JSON

import json
import logging
import os
import threading
from collections import defaultdict

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path="metrics.json", persist=True):
        self.path = path
        self.persist = persist
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._lock = threading.Lock()
        self._load()

    def _load(self):
        if not (self.persist and os.path.exists(self.path)):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("discarding unreadable metrics %s: %s", self.path, e)
            self.m.clear()
            self.n.clear()

    def save(self):
        if not self.persist:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        with self._lock:
            self.m[key] += val
            self.n[key] += 1
            self.save()

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        """[(key, count, avg)] for every recorded key."""
        return [(k, self.n[k], self.avg(k)) for k in sorted(self.m)]
