"""
K-fold cross-validation splitter.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import ValidationError
from pylearnkit.core.protocols import Splitter
from pylearnkit.core.rng import duplicate_rng
from pylearnkit.core.validation import (
    check_convert_sample_array,
    check_params_boolean,
    check_params_integer,
    check_params_integer_or_none,
    check_params_nonnegative,
    check_params_range,
)
from pylearnkit.model_selection._common import SplitterBase, train_test_pair


class KFold(SplitterBase, Splitter):
    """
    Split samples into n_splits consecutive folds.

    Each fold is the test set once while the remaining folds form the
    training set. When n_samples is not a multiple of n_splits, the first
    n_samples % n_splits folds hold one extra sample. With shuffle=True
    the sample order is permuted first; repeated split() calls on the
    same instance return the same folds.

    Args:
        n_splits: Number of folds (>= 2)
        shuffle: Permute samples before folding
        random_seed: Seed of the permutation

    Example:
        >>> KFold(n_splits=2).split([[0.0], [1.0], [2.0]])
        [(array([2]), array([0, 1])), (array([0, 1]), array([2]))]
    """

    def __init__(
        self,
        n_splits: int = 3,
        *,
        shuffle: bool = False,
        random_seed: int | None = None,
    ):
        check_params_integer(n_splits=n_splits)
        check_params_boolean(shuffle=shuffle)
        check_params_integer_or_none(random_seed=random_seed)
        check_params_nonnegative(random_seed=random_seed)
        check_params_range('n_splits', n_splits, low=2)
        super().__init__(n_splits=n_splits, shuffle=shuffle, random_seed=random_seed)

    def split(
        self,
        x: ArrayLike,
        y: ArrayLike | None = None,
    ) -> list[tuple[NDArray[np.intp], NDArray[np.intp]]]:
        """
        Raises:
            ValidationError: If n_splits exceeds n_samples
        """
        x = check_convert_sample_array(x)
        n_samples = x.shape[0]
        if self.n_splits > n_samples:
            raise ValidationError(
                f"x: n_splits={self.n_splits} cannot exceed the number of samples, "
                f"got {n_samples}"
            )

        ids = np.arange(n_samples)
        if self.params['shuffle']:
            ids = duplicate_rng(self.rng).permutation(n_samples)

        return [
            train_test_pair(n_samples, fold)
            for fold in np.array_split(ids, self.n_splits)
        ]
