"""
Common types for model selection.

Defines the shared splitter state and CVParams, the payload of
cross-validation results.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray

from pylearnkit.core.rng import resolve_seed


def train_test_pair(
    n_samples: int,
    test_ids: NDArray[np.intp],
) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """Sorted (train, test) index pair where train is the complement of test."""
    test_ids = np.sort(test_ids)
    train_ids = np.setdiff1d(np.arange(n_samples), test_ids, assume_unique=True)
    return train_ids, test_ids


class SplitterBase:
    """
    Configuration and generator shared by the splitters.

    The seed is resolved once at construction and recorded in params.
    split() draws from a copy of rng, so a splitter instance always
    produces the same partitions.
    """

    def __init__(self, *, random_seed: int | None = None, **params: Any):
        params['random_seed'] = resolve_seed(random_seed)
        self._params = MappingProxyType(dict(params))
        self.rng = np.random.default_rng(self._params['random_seed'])

    @property
    def params(self) -> Mapping[str, Any]:
        return self._params

    @property
    def n_splits(self) -> int:
        return self._params['n_splits']

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{type(self).__name__}({args})"


@dataclass(frozen=True)
class CVParams:
    """
    Parameter payload for cross-validation.

    Attributes:
        test_score: Score on each test fold, shape (n_splits,)
        train_score: Score on each training fold, or None when not requested
        fit_time: Wall-clock seconds spent in fit() per fold
    """
    test_score: NDArray[np.float64]
    train_score: NDArray[np.float64] | None
    fit_time: NDArray[np.float64]
