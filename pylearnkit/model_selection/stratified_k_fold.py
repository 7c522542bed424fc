"""
Stratified k-fold cross-validation splitter.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import ValidationError
from pylearnkit.core.protocols import Splitter
from pylearnkit.core.rng import duplicate_rng
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_sample_array,
    check_params_boolean,
    check_params_integer,
    check_params_integer_or_none,
    check_params_nonnegative,
    check_params_range,
    check_sample_size,
)
from pylearnkit.model_selection._common import SplitterBase, train_test_pair


class StratifiedKFold(SplitterBase, Splitter):
    """
    K-fold splitter that preserves class proportions in every fold.

    The samples of each class are divided into n_splits nearly equal
    parts (in sample order, or permuted when shuffle=True); test fold k
    gathers part k of every class.

    Args:
        n_splits: Number of folds (>= 2)
        shuffle: Permute samples within each class before folding
        random_seed: Seed of the permutation
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
            ValidationError: If y is missing or a class has fewer than
                n_splits samples
        """
        if y is None:
            raise ValidationError("y: StratifiedKFold requires labels to split on")
        x = check_convert_sample_array(x)
        y = check_convert_label_array(y)
        check_sample_size(x, y)

        classes, counts = np.unique(y, return_counts=True)
        if counts.min() < self.n_splits:
            small = classes[counts.argmin()]
            raise ValidationError(
                f"y: every class needs at least n_splits={self.n_splits} samples, "
                f"class {small} has {counts.min()}"
            )

        rng = duplicate_rng(self.rng)
        parts = []
        for label in classes:
            ids = np.flatnonzero(y == label)
            if self.params['shuffle']:
                ids = rng.permutation(ids)
            parts.append(np.array_split(ids, self.n_splits))

        n_samples = x.shape[0]
        return [
            train_test_pair(n_samples, np.concatenate([p[k] for p in parts]))
            for k in range(self.n_splits)
        ]
