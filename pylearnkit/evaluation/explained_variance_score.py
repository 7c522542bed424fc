"""
Explained variance regression score.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.core.compute.precision import safe_divide
from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_target_pair


class ExplainedVarianceScore(Evaluator):
    """
    Share of the target variance explained by the predictions.

    For each output column j:

        EV_j = 1 - Var(y_j - yhat_j) / Var(y_j)

    Differs from R2Score only in ignoring a constant bias of the
    residuals. A column with zero variance scores 0.0, and the result is
    the unweighted mean over columns.

    Example:
        >>> round(ExplainedVarianceScore().score([3, -0.5, 2, 7], [2.5, 0.0, 2, 8]), 4)
        0.9572
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_target_pair(y_true, y_pred)
        numerator = np.var(y_true - y_pred, axis=0)
        denominator = np.var(y_true, axis=0)

        if y_true.ndim == 1:
            if denominator == 0:
                return 0.0
            return float(1.0 - numerator / denominator)

        scores = np.where(
            denominator == 0,
            0.0,
            1.0 - safe_divide(numerator, denominator),
        )
        return float(scores.mean())

    def __repr__(self) -> str:
        return "ExplainedVarianceScore()"
