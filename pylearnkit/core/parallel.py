"""
Fork-join dispatch of independent tasks.

parallel_map() runs func(0), ..., func(n_tasks - 1) and returns their
results as an index-aligned list. With the parallel capability enabled the
tasks run on a joblib worker pool; otherwise they run sequentially in index
order. Both paths produce the same list because tasks share no mutable
state: each receives its own forked generator and data slice.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from pylearnkit.core.capabilities import CAPABILITY_PARALLEL, check_capability


def effective_n_jobs(n_jobs: int | None) -> int:
    """
    Number of workers a job count stands for.

    Args:
        n_jobs: None means 1; non-positive means all available processors

    Returns:
        Positive worker count
    """
    if n_jobs is None:
        return 1
    if n_jobs <= 0:
        if check_capability(CAPABILITY_PARALLEL, warn=False):
            import joblib
            return joblib.cpu_count()
        return os.cpu_count() or 1
    return int(n_jobs)


def parallel_map(
    n_tasks: int,
    func: Callable[[int], Any],
    *,
    n_jobs: int | None = None,
    enabled: bool | None = None,
    prefer: str = 'threads',
) -> list[Any]:
    """
    Apply func to every task index and collect the results.

    Args:
        n_tasks: Number of independent tasks
        func: Callable taking the task index
        n_jobs: Worker count (None sequential, <= 0 all processors)
        enabled: Force the parallel path on/off; None means "use the
            parallel capability if installed and n_jobs is set"
        prefer: joblib worker preference, 'threads' or 'processes'

    Returns:
        List of n_tasks results, result i from func(i)

    Raises:
        Whatever the first failing task raised; remaining results are
        not collected.
    """
    if enabled is None:
        enabled = n_jobs is not None and check_capability(CAPABILITY_PARALLEL, warn=False)

    n_workers = effective_n_jobs(n_jobs)
    if not enabled or n_workers == 1 or n_tasks <= 1:
        return [func(i) for i in range(n_tasks)]

    from joblib import Parallel, delayed

    return Parallel(n_jobs=n_workers, prefer=prefer)(
        delayed(func)(i) for i in range(n_tasks)
    )
