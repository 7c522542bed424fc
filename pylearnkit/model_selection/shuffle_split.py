"""
Random permutation splitter.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import ValidationError
from pylearnkit.core.protocols import Splitter
from pylearnkit.core.rng import duplicate_rng
from pylearnkit.core.validation import (
    check_convert_sample_array,
    check_params_integer,
    check_params_integer_or_none,
    check_params_nonnegative,
    check_params_numeric,
    check_params_numeric_or_none,
    check_params_positive,
    check_params_range,
)
from pylearnkit.model_selection._common import SplitterBase


class ShuffleSplit(SplitterBase, Splitter):
    """
    Independent random train/test splits.

    Every split permutes the samples and takes the first
    int(test_size * n_samples) as the test set. The training set is the
    remainder, or its first int(train_size * n_samples) samples when
    train_size is given. Test sets of different splits may overlap.

    Args:
        n_splits: Number of splits
        test_size: Test fraction in (0, 1)
        train_size: Training fraction in (0, 1), or None for the complement
        random_seed: Seed of the permutations
    """

    def __init__(
        self,
        n_splits: int = 3,
        *,
        test_size: float = 0.1,
        train_size: float | None = None,
        random_seed: int | None = None,
    ):
        check_params_integer(n_splits=n_splits)
        check_params_numeric(test_size=test_size)
        check_params_numeric_or_none(train_size=train_size)
        check_params_integer_or_none(random_seed=random_seed)
        check_params_positive(n_splits=n_splits)
        check_params_nonnegative(random_seed=random_seed)
        check_params_range(
            'test_size', test_size,
            low=0.0, high=1.0, low_inclusive=False, high_inclusive=False,
        )
        if train_size is not None:
            check_params_range(
                'train_size', train_size,
                low=0.0, high=1.0, low_inclusive=False, high_inclusive=False,
            )
        super().__init__(
            n_splits=n_splits,
            test_size=test_size,
            train_size=train_size,
            random_seed=random_seed,
        )

    def split(
        self,
        x: ArrayLike,
        y: ArrayLike | None = None,
    ) -> list[tuple[NDArray[np.intp], NDArray[np.intp]]]:
        """
        Raises:
            ValidationError: If either side would be empty or the two
                sides together exceed n_samples
        """
        x = check_convert_sample_array(x)
        n_samples = x.shape[0]
        train_size = self.params['train_size']
        n_test = int(self.params['test_size'] * n_samples)
        n_train = n_samples - n_test if train_size is None else int(train_size * n_samples)

        if n_test < 1:
            raise ValidationError(
                f"x: test_size={self.params['test_size']} leaves no test samples "
                f"out of {n_samples}"
            )
        if n_train < 1:
            raise ValidationError(
                f"x: train_size leaves no training samples out of {n_samples}"
            )
        if n_test + n_train > n_samples:
            raise ValidationError(
                f"x: {n_test} test and {n_train} training samples exceed "
                f"the {n_samples} available"
            )

        rng = duplicate_rng(self.rng)
        splits = []
        for _ in range(self.n_splits):
            perm = rng.permutation(n_samples)
            test_ids = np.sort(perm[:n_test])
            train_ids = np.sort(perm[n_test:n_test + n_train])
            splits.append((train_ids, test_ids))
        return splits
