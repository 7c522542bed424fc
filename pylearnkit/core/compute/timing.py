"""
Wall-clock timing for compound operations.

Timer measures a whole run and its named phases; timed_call measures a
single call, e.g. one fold's fit().
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator


class Timer:
    """
    Timer for one run, split into named phases.

    Example:
        with Timer() as timer:
            with timer.section('split'):
                folds = splitter.split(x, y)
            with timer.section('folds'):
                reports = [run_fold(k) for k in range(len(folds))]
        timer.result()
        # {'total_seconds': 0.05, 'split': 0.001, 'folds': 0.049}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._began: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self._began = time.perf_counter()
        self._total = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to phase `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + time.perf_counter() - began

    @property
    def total_seconds(self) -> float:
        """
        Raises:
            RuntimeError: If the timed block has not finished
        """
        if self._total is None:
            raise RuntimeError("Timer has not finished; use it as a context manager")
        return self._total

    def result(self) -> dict[str, float]:
        """'total_seconds' plus one entry per phase."""
        return {'total_seconds': self.total_seconds, **self._phases}


def timed_call(func: Callable[..., Any], *args: Any) -> tuple[Any, float]:
    """Call func(*args); return its result and the seconds it took."""
    began = time.perf_counter()
    value = func(*args)
    return value, time.perf_counter() - began
