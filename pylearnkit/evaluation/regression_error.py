"""
Error-based regression evaluators.

Unlike R2Score these are losses: smaller is better.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.core.protocols import Evaluator
from pylearnkit.core.validation import check_1d
from pylearnkit.evaluation._common import check_target_pair


class MeanSquaredError(Evaluator):
    """Mean of squared residuals over all samples and outputs."""

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_target_pair(y_true, y_pred)
        return float(np.mean((y_true - y_pred) ** 2))

    def __repr__(self) -> str:
        return "MeanSquaredError()"


class MeanAbsoluteError(Evaluator):
    """Mean of absolute residuals over all samples and outputs."""

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_target_pair(y_true, y_pred)
        return float(np.mean(np.abs(y_true - y_pred)))

    def __repr__(self) -> str:
        return "MeanAbsoluteError()"


class MedianAbsoluteError(Evaluator):
    """
    Median of absolute residuals.

    Robust to a few large errors, unlike MeanAbsoluteError. Defined for
    single-output targets only.

    Raises:
        ShapeError: If the targets are 2-D
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_target_pair(y_true, y_pred)
        check_1d(y_true, 'y_true')
        return float(np.median(np.abs(y_true - y_pred)))

    def __repr__(self) -> str:
        return "MedianAbsoluteError()"
