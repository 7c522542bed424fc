"""
Precision, recall and F-score.

Per-class scores are computed over the classes present in y_true, sorted
ascending. They are then aggregated by one of three policies:

    binary  score of the positive class (the largest label)
    macro   unweighted mean over classes
    micro   true positives and denominators pooled over classes first

A class with no predicted positives (precision) or no actual positives
(recall) scores 0.0, and an F-score whose precision and recall are both
zero is 0.0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.protocols import Evaluator
from pylearnkit.core.validation import check_params_choice, check_params_string
from pylearnkit.evaluation._common import check_label_pair

AVERAGE_CHOICES = ('binary', 'micro', 'macro')


def _class_counts(
    y_true: NDArray[np.int32],
    y_pred: NDArray[np.int32],
) -> tuple[NDArray[np.int32], list[int], list[int], list[int]]:
    """Per-class true positives, predicted positives and actual positives."""
    labels = np.unique(y_true)
    n_tp, n_pred, n_actual = [], [], []
    for label in labels:
        predicted = y_pred == label
        actual = y_true == label
        n_tp.append(int(np.count_nonzero(predicted & actual)))
        n_pred.append(int(np.count_nonzero(predicted)))
        n_actual.append(int(np.count_nonzero(actual)))
    return labels, n_tp, n_pred, n_actual


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _harmonic(p: float, r: float) -> float:
    if p == 0.0 and r == 0.0:
        return 0.0
    return (2.0 * p * r) / (p + r)


def precision_each_class(y_true: ArrayLike, y_pred: ArrayLike) -> NDArray[np.float64]:
    """Precision of every class in y_true, ordered by label."""
    y_true, y_pred = check_label_pair(y_true, y_pred)
    _, n_tp, n_pred, _ = _class_counts(y_true, y_pred)
    return np.array([_ratio(tp, p) for tp, p in zip(n_tp, n_pred)])


def recall_each_class(y_true: ArrayLike, y_pred: ArrayLike) -> NDArray[np.float64]:
    """Recall of every class in y_true, ordered by label."""
    y_true, y_pred = check_label_pair(y_true, y_pred)
    _, n_tp, _, n_actual = _class_counts(y_true, y_pred)
    return np.array([_ratio(tp, a) for tp, a in zip(n_tp, n_actual)])


def f_score_each_class(y_true: ArrayLike, y_pred: ArrayLike) -> NDArray[np.float64]:
    """F1-score of every class in y_true, ordered by label."""
    precisions = precision_each_class(y_true, y_pred)
    recalls = recall_each_class(y_true, y_pred)
    return np.array([_harmonic(p, r) for p, r in zip(precisions.tolist(), recalls.tolist())])


def micro_average_precision(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Pooled true positives over pooled predicted positives."""
    y_true, y_pred = check_label_pair(y_true, y_pred)
    _, n_tp, n_pred, _ = _class_counts(y_true, y_pred)
    return _ratio(sum(n_tp), sum(n_pred))


def micro_average_recall(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Pooled true positives over pooled actual positives."""
    y_true, y_pred = check_label_pair(y_true, y_pred)
    _, n_tp, _, n_actual = _class_counts(y_true, y_pred)
    return _ratio(sum(n_tp), sum(n_actual))


def micro_average_f_score(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Harmonic mean of the micro-averaged precision and recall."""
    return _harmonic(
        micro_average_precision(y_true, y_pred),
        micro_average_recall(y_true, y_pred),
    )


def _macro(scores: NDArray[np.float64]) -> float:
    values = scores.tolist()
    return sum(values) / len(values)


def macro_average_precision(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    return _macro(precision_each_class(y_true, y_pred))


def macro_average_recall(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    return _macro(recall_each_class(y_true, y_pred))


def macro_average_f_score(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    return _macro(f_score_each_class(y_true, y_pred))


class _AveragedEvaluator(Evaluator):
    """Evaluator parameterized by an averaging policy."""

    def __init__(self, average: str = 'binary'):
        check_params_string(average=average)
        check_params_choice('average', average, AVERAGE_CHOICES)
        self._average = average

    @property
    def average(self) -> str:
        return self._average

    def __repr__(self) -> str:
        return f"{type(self).__name__}(average={self._average!r})"


class Precision(_AveragedEvaluator):
    """Precision with binary, micro or macro averaging."""

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        if self._average == 'binary':
            return float(precision_each_class(y_true, y_pred)[-1])
        if self._average == 'micro':
            return micro_average_precision(y_true, y_pred)
        return macro_average_precision(y_true, y_pred)


class Recall(_AveragedEvaluator):
    """Recall with binary, micro or macro averaging."""

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        if self._average == 'binary':
            return float(recall_each_class(y_true, y_pred)[-1])
        if self._average == 'micro':
            return micro_average_recall(y_true, y_pred)
        return macro_average_recall(y_true, y_pred)


class FScore(_AveragedEvaluator):
    """
    F1-score with binary, micro or macro averaging.

    Example:
        >>> y_true = [0, 1, 2, 0, 1, 2, 3, 3, 0, 0]
        >>> y_pred = [0, 2, 1, 2, 1, 0, 3, 3, 0, 0]
        >>> FScore(average='macro').score(y_true, y_pred)
        0.5625
        >>> FScore(average='micro').score(y_true, y_pred)
        0.6
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        if self._average == 'binary':
            return float(f_score_each_class(y_true, y_pred)[-1])
        if self._average == 'micro':
            return micro_average_f_score(y_true, y_pred)
        return macro_average_f_score(y_true, y_pred)
