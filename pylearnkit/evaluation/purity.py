"""
Purity of a clustering against ground-truth classes.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_label_pair


def contingency_table(
    y_true: NDArray[np.int32],
    y_pred: NDArray[np.int32],
) -> tuple[NDArray[np.int64], NDArray[np.int32], NDArray[np.int32]]:
    """
    Count co-occurrences of predicted clusters and true classes.

    Args:
        y_true: Validated class labels
        y_pred: Validated cluster labels

    Returns:
        (table, cluster_ids, class_ids) where table[k, j] is the number of
        samples in cluster cluster_ids[k] with class class_ids[j]. Both id
        arrays are sorted ascending.
    """
    cluster_ids, cluster_idx = np.unique(y_pred, return_inverse=True)
    class_ids, class_idx = np.unique(y_true, return_inverse=True)
    table = np.zeros((cluster_ids.size, class_ids.size), dtype=np.int64)
    np.add.at(table, (cluster_idx.ravel(), class_idx.ravel()), 1)
    return table, cluster_ids, class_ids


def majority_classes(y_true: ArrayLike, y_pred: ArrayLike) -> dict[int, int]:
    """
    Map each predicted cluster to its best-overlapping true class.

    Ties go to the lowest class label.
    """
    y_true, y_pred = check_label_pair(y_true, y_pred)
    table, cluster_ids, class_ids = contingency_table(y_true, y_pred)
    best = table.argmax(axis=1)
    return {int(k): int(class_ids[j]) for k, j in zip(cluster_ids, best)}


class Purity(Evaluator):
    """
    Clustering purity.

        purity = sum_k max_j |cluster_k & class_j| / n_samples

    Example:
        >>> Purity().score([0, 0, 1, 2, 1, 2], [0, 0, 1, 1, 2, 2])
        0.6666666666666666
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        """
        Args:
            y_true: Ground truth class labels, shape (n_samples,)
            y_pred: Predicted cluster labels, shape (n_samples,)

        Returns:
            Purity in (0, 1]
        """
        y_true, y_pred = check_label_pair(y_true, y_pred)
        table, _, _ = contingency_table(y_true, y_pred)
        return int(table.max(axis=1).sum()) / y_pred.shape[0]

    def __repr__(self) -> str:
        return "Purity()"
