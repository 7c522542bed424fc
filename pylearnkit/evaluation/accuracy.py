"""
Classification accuracy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_label_pair


class Accuracy(Evaluator):
    """
    Mean accuracy: the fraction of labels predicted exactly.

    Example:
        >>> Accuracy().score([1, 1, -1, -1], [1, -1, -1, -1])
        0.75
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        """
        Args:
            y_true: Ground truth labels, shape (n_samples,)
            y_pred: Predicted labels, shape (n_samples,)

        Returns:
            count(y_true == y_pred) / n_samples
        """
        y_true, y_pred = check_label_pair(y_true, y_pred)
        n_correct = int(np.count_nonzero(y_true == y_pred))
        return n_correct / y_true.shape[0]

    def __repr__(self) -> str:
        return "Accuracy()"
