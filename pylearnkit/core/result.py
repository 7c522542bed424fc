"""
Result envelope returned by compound operations.

A compound operation (cross_validate, for instance) produces a payload of
several arrays plus bookkeeping: the settings it ran with, how long each
phase took, which execution path was taken and any non-fatal problems.
The payload type varies per operation; the bookkeeping does not, so it
lives here.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen payload plus run metadata.

    Attributes:
        params: Operation payload, e.g. CVParams
        info: Settings and counts of the run (estimator, n_splits, ...)
        timing: Phase timings from Timer.result(), or None
        backend_name: 'sequential' or 'joblib'
        warnings: Non-fatal problems, in the order they were found
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_seconds(self) -> float | None:
        if self.timing is None:
            return None
        return self.timing.get('total_seconds')

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains substring."""
        return any(substring in w for w in self.warnings)
