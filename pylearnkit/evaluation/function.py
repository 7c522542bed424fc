"""
Functional helpers over label vectors.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import SizeMismatchError
from pylearnkit.evaluation._common import check_label_pair
from pylearnkit.evaluation.accuracy import Accuracy
from pylearnkit.evaluation.precision_recall import (
    f_score_each_class,
    macro_average_f_score,
    macro_average_precision,
    macro_average_recall,
    precision_each_class,
    recall_each_class,
)


def confusion_matrix(y_true: ArrayLike, y_pred: ArrayLike) -> NDArray[np.int32]:
    """
    Count predictions per (true class, predicted class) pair.

    Rows and columns follow the sorted labels of y_true; predictions of a
    label that never occurs in y_true are not counted.

    Args:
        y_true: Ground truth labels, shape (n_samples,)
        y_pred: Predicted labels, shape (n_samples,)

    Returns:
        int32 array of shape (n_classes, n_classes)

    Example:
        >>> confusion_matrix([0, 0, 1, 1], [0, 1, 1, 1])
        array([[1, 1],
               [0, 2]], dtype=int32)
    """
    y_true, y_pred = check_label_pair(y_true, y_pred)
    labels = np.unique(y_true)
    n_classes = labels.size
    matrix = np.zeros((n_classes, n_classes), dtype=np.int32)
    known = np.isin(y_pred, labels)
    rows = np.searchsorted(labels, y_true[known])
    cols = np.searchsorted(labels, y_pred[known])
    np.add.at(matrix, (rows, cols), 1)
    return matrix


def classification_report(
    y_true: ArrayLike,
    y_pred: ArrayLike,
    target_names: Sequence[str] | None = None,
    output_dict: bool = False,
) -> str | dict[str, Any]:
    """
    Summarize precision, recall, F1-score and support per class.

    Classes are the labels of y_true in ascending order. Besides the
    per-class rows the summary holds the accuracy, the unweighted (macro)
    average and the support-weighted average.

    Args:
        y_true: Ground truth labels, shape (n_samples,)
        y_pred: Predicted labels, shape (n_samples,)
        target_names: Display names of the classes, in label order.
            Defaults to the labels themselves.
        output_dict: Return a dict instead of a printable table

    Returns:
        The table as a string, or a dict keyed by class name plus
        'accuracy', 'macro_avg' and 'weighted_avg'

    Raises:
        SizeMismatchError: If target_names does not name every class

    Example:
        >>> print(classification_report([0, 1, 2, 2, 2, 0, 1, 2], [0, 0, 2, 0, 2, 0, 0, 2]))
                      precision    recall  f1-score   support
        <BLANKLINE>
                   0       0.40      1.00      0.57         2
                   1       0.00      0.00      0.00         2
                   2       1.00      0.75      0.86         4
        <BLANKLINE>
            accuracy                           0.62         8
           macro avg       0.47      0.58      0.48         8
        weighted avg       0.60      0.62      0.57         8
        <BLANKLINE>
    """
    y_true, y_pred = check_label_pair(y_true, y_pred)
    labels, supports = np.unique(y_true, return_counts=True)
    if target_names is None:
        target_names = [str(label) for label in labels]
    elif len(target_names) != labels.size:
        raise SizeMismatchError(
            f"target_names: expected {labels.size} names, got {len(target_names)}",
            sizes={'target_names': len(target_names), 'classes': int(labels.size)},
        )

    precisions = precision_each_class(y_true, y_pred)
    recalls = recall_each_class(y_true, y_pred)
    fscores = f_score_each_class(y_true, y_pred)
    n_samples = int(supports.sum())
    weights = supports / n_samples
    accuracy = Accuracy().score(y_true, y_pred)
    averages = {
        'macro_avg': (
            macro_average_precision(y_true, y_pred),
            macro_average_recall(y_true, y_pred),
            macro_average_f_score(y_true, y_pred),
        ),
        'weighted_avg': (
            float(np.sum(precisions * weights)),
            float(np.sum(recalls * weights)),
            float(np.sum(fscores * weights)),
        ),
    }

    if output_dict:
        report: dict[str, Any] = {}
        for n, name in enumerate(target_names):
            report[name] = {
                'precision': float(precisions[n]),
                'recall': float(recalls[n]),
                'fscore': float(fscores[n]),
                'support': int(supports[n]),
            }
        report['accuracy'] = accuracy
        for key, (p, r, f) in averages.items():
            report[key] = {'precision': p, 'recall': r, 'fscore': f, 'support': n_samples}
        return report

    width = max(len('weighted avg'), *(len(name) for name in target_names))
    lines = [f"{'':>{width}}  precision    recall  f1-score   support", ""]
    for n, name in enumerate(target_names):
        lines.append(
            f"{name:>{width}} {precisions[n]:>10.2f}{recalls[n]:>10.2f}"
            f"{fscores[n]:>10.2f}{int(supports[n]):>10}"
        )
    lines.append("")
    lines.append(f"{'accuracy':>{width}} {accuracy:>30.2f}{n_samples:>10}")
    for key, (p, r, f) in averages.items():
        title = key.replace('_', ' ')
        lines.append(f"{title:>{width}} {p:>10.2f}{r:>10.2f}{f:>10.2f}{n_samples:>10}")
    return "\n".join(lines) + "\n"
