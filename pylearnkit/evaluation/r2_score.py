"""
Coefficient of determination.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.core.compute.precision import safe_divide
from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_target_pair


class R2Score(Evaluator):
    """
    Coefficient of determination, averaged over output columns.

    For each output column j:

        R2_j = 1 - sum((y_j - yhat_j)^2) / sum((y_j - mean(y_j))^2)

    A column with zero variance scores exactly 0.0. The result is the
    unweighted mean of the per-column scores (or the single score for
    1-D targets).
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        """
        Args:
            y_true: Ground truth, shape (n_samples,) or (n_samples, n_outputs)
            y_pred: Predictions with the same shape as y_true

        Returns:
            Coefficient of determination
        """
        y_true, y_pred = check_target_pair(y_true, y_pred)
        n_samples = y_true.shape[0]

        numerator = ((y_true - y_pred) ** 2).sum(axis=0)
        yt_mean = y_true.sum(axis=0) / n_samples
        denominator = ((y_true - yt_mean) ** 2).sum(axis=0)

        if y_true.ndim == 1:
            if denominator == 0:
                return 0.0
            return float(1.0 - numerator / denominator)

        scores = np.where(
            denominator == 0,
            0.0,
            1.0 - safe_divide(numerator, denominator),
        )
        return float(scores.sum() / scores.size)

    def __repr__(self) -> str:
        return "R2Score()"
