# timing.py - wall-clock timing for cli calls

import time
from functools import wraps
from typing import Callable


def timed(func: Callable) -> Callable:
    """Wrap `func` so each call returns (result, elapsed_seconds)."""
    @wraps(func)
    def _wrap(*a, **kw):
        t0 = time.perf_counter()
        res = func(*a, **kw)
        return res, time.perf_counter() - t0
    return _wrap
