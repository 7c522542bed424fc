"""
Logarithmic loss of predicted class probabilities.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.core.exceptions import ShapeError, ValidationError
from pylearnkit.core.protocols import Evaluator
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_target_value_array,
    check_params_numeric,
    check_params_range,
    check_sample_size,
)


class LogLoss(Evaluator):
    """
    Mean negative log-likelihood of the true labels.

    Unlike the other classification evaluators, y_pred holds
    probabilities rather than labels:

        binary      y_pred has shape (n_samples,) and gives the probability
                    of the positive class, i.e. any label other than the
                    smallest one
        multiclass  y_pred has shape (n_samples, n_classes); rows are
                    renormalized after clipping

    Probabilities are clipped to [eps, 1 - eps] so a confident mistake
    costs -log(eps) instead of infinity. Smaller is better.

    cross_validate scores LogLoss on predict_proba() instead of predict().

    Example:
        >>> round(LogLoss().score([0, 1, 1, 0], [0.1, 0.9, 0.8, 0.35]), 4)
        0.2162
    """

    def __init__(self, eps: float = 1e-15):
        check_params_numeric(eps=eps)
        check_params_range('eps', eps, low=0.0, high=0.5, low_inclusive=False, high_inclusive=False)
        self._eps = float(eps)

    @property
    def eps(self) -> float:
        return self._eps

    def score(self, y_true: ArrayLike, y_pred: ArrayLike, labels: ArrayLike | None = None) -> float:
        """
        Args:
            y_true: Ground truth labels, shape (n_samples,)
            y_pred: Probabilities, shape (n_samples,) or (n_samples, n_classes)
            labels: Labels of the columns of y_pred, in order. Defaults to
                the sorted labels of y_true.

        Returns:
            Log loss, >= 0

        Raises:
            ShapeError: If y_pred has a column count other than len(labels)
            ValidationError: If y_true holds a label missing from labels
        """
        y_true = check_convert_label_array(y_true, 'y_true')
        y_pred = check_convert_target_value_array(y_pred, 'y_pred')
        check_sample_size(y_true, y_pred, names=('y_true', 'y_pred'))

        if labels is None:
            labels = np.unique(y_true)
        else:
            labels = check_convert_label_array(labels, 'labels')
        unknown = ~np.isin(y_true, labels)
        if unknown.any():
            raise ValidationError(
                f"y_true: labels {np.unique(y_true[unknown]).tolist()} "
                f"have no column in y_pred"
            )

        clipped = np.clip(y_pred, self._eps, 1.0 - self._eps)
        if clipped.ndim == 1:
            positive = (y_true != labels.min()).astype(np.float64)
            losses = -(positive * np.log(clipped) + (1.0 - positive) * np.log(1.0 - clipped))
            return float(losses.mean())

        if clipped.shape[1] != labels.size:
            raise ShapeError(
                f"y_pred: expected {labels.size} probability columns, got {clipped.shape[1]}",
                name='y_pred',
                expected_ndim=(2,),
                actual_ndim=clipped.ndim,
                actual_shape=clipped.shape,
            )
        clipped /= clipped.sum(axis=1, keepdims=True)
        column_of = {int(label): j for j, label in enumerate(labels)}
        columns = np.array([column_of[int(label)] for label in y_true])
        losses = -np.log(clipped[np.arange(y_true.size), columns])
        return float(losses.mean())

    def __repr__(self) -> str:
        return f"LogLoss(eps={self._eps!r})"
