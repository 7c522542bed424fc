"""
Rand index adjusted for chance.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.protocols import Evaluator
from pylearnkit.evaluation._common import check_label_pair
from pylearnkit.evaluation.purity import contingency_table


def _pairs(counts: NDArray[np.int64]) -> int:
    """Number of unordered pairs within each count, summed."""
    return int(np.sum(counts * (counts - 1) // 2))


class AdjustedRandScore(Evaluator):
    """
    Pair-counting agreement of a clustering with true classes.

        ARI = (index - expected) / (max - expected)

    where index counts sample pairs placed together in both partitions,
    expected is its value under random labeling and max is the mean of
    the pair counts of the two partitions. 1.0 means identical
    partitions, about 0.0 a random one; negative values are possible.

    A single class matched by a single cluster, or all-singleton classes
    matched by all-singleton clusters, score exactly 1.0.

    Example:
        >>> round(AdjustedRandScore().score([0, 0, 1, 1], [0, 0, 1, 2]), 4)
        0.5714
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        y_true, y_pred = check_label_pair(y_true, y_pred)
        n_samples = y_true.shape[0]
        table, cluster_ids, class_ids = contingency_table(y_true, y_pred)
        n_clusters, n_classes = cluster_ids.size, class_ids.size
        if (n_classes == 1 and n_clusters == 1) or (n_classes == n_clusters == n_samples):
            return 1.0

        index = _pairs(table)
        class_pairs = _pairs(table.sum(axis=0))
        cluster_pairs = _pairs(table.sum(axis=1))
        expected = class_pairs * cluster_pairs / (n_samples * (n_samples - 1) / 2)
        maximum = (class_pairs + cluster_pairs) / 2
        return float((index - expected) / (maximum - expected))

    def __repr__(self) -> str:
        return "AdjustedRandScore()"
