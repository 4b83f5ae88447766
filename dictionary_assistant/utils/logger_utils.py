# logger_utils.py - logging setup and timing metrics for the assistant

import logging
import os
import time
from datetime import datetime
from typing import Optional

from rich.logging import RichHandler

# Path to the default log file, can be overridden through config
DEFAULT_LOG_PATH = os.path.join("logs", "dictionary.log")

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO", path: Optional[str] = DEFAULT_LOG_PATH) -> None:
    """
    Route the package loggers to a rich console handler and, if `path` is
    given, to an append-only log file.
    Calling it again replaces the handlers installed by the previous call.
    """
    root = logging.getLogger("dictionary_assistant")
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    console = RichHandler(show_path=False, rich_tracebacks=True)
    console.setLevel(logging.WARNING)
    root.addHandler(console)

    if path:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)


class Log:
    """Timing helpers: metric lines go to the package logger."""

    logger = logging.getLogger("dictionary_assistant.metrics")

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts).
        Example: [12:45:02] lookup done: 0.001s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        Log.logger.info(f"[{ts}] {tag}: {value}{unit}")

    @staticmethod
    def time_block(label):
        """
        Measure how long a block takes:
            with Log.time_block("index build"):
                build()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
