"""
Information-theoretic agreement between a clustering and true classes.

Both measures work on the contingency table of (cluster, class) counts,
so cluster ids need not match class ids: only the grouping matters.
Logarithms are natural, so MutualInformation is in nats.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_label_pair
from pylearnkit.evaluation.purity import contingency_table


def _mutual_information(table: NDArray[np.int64]) -> float:
    n_samples = table.sum()
    cluster_sizes = table.sum(axis=1, keepdims=True)
    class_sizes = table.sum(axis=0, keepdims=True)
    nonzero = table > 0
    joint = table[nonzero] / n_samples
    expected = (cluster_sizes * class_sizes)[nonzero] / n_samples**2
    return float(np.sum(joint * np.log(joint / expected)))


def _entropy(sizes: NDArray[np.int64]) -> float:
    ratio = sizes[sizes > 0] / sizes.sum()
    return float(-np.sum(ratio * np.log(ratio)))


class MutualInformation(Evaluator):
    """
    Mutual information of the cluster and class assignments.

        MI = sum_kj (n_kj / n) * log(n * n_kj / (n_k * n_j))

    Zero when the clustering is independent of the classes; bounded above
    by the smaller of the two entropies.
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_label_pair(y_true, y_pred)
        table, _, _ = contingency_table(y_true, y_pred)
        return _mutual_information(table)

    def __repr__(self) -> str:
        return "MutualInformation()"


class NormalizedMutualInformation(Evaluator):
    """
    Mutual information scaled to [0, 1] by the geometric mean of the
    class and cluster entropies.

        NMI = MI / sqrt(H(classes) * H(clusters))

    If either entropy is zero (a single class or a single cluster) the
    score is 0.0.

    Example:
        >>> round(NormalizedMutualInformation().score([0, 0, 1, 1], [1, 1, 0, 0]), 6)
        1.0
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_label_pair(y_true, y_pred)
        table, _, _ = contingency_table(y_true, y_pred)
        class_entropy = _entropy(table.sum(axis=0))
        if class_entropy == 0.0:
            return 0.0
        cluster_entropy = _entropy(table.sum(axis=1))
        if cluster_entropy == 0.0:
            return 0.0
        return float(_mutual_information(table) / np.sqrt(class_entropy * cluster_entropy))

    def __repr__(self) -> str:
        return "NormalizedMutualInformation()"
