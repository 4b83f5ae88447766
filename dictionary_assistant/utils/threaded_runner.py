# threaded_runner.py - run callables in a small thread pool and collect results.

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List


def run_parallel(tasks: Iterable[Callable], max_workers: int = 4) -> List:
    """
    Run zero-argument callables in a thread pool.
    Results come back in task order; the first task exception is re-raised.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = [ex.submit(t) for t in tasks]
        return [f.result() for f in futs]
