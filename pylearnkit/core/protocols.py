"""
Core protocols for pylearnkit.

These define structural interfaces that collaborators of the estimator
contract must satisfy. We use Protocol (structural typing) so that any
object with a matching score() or split() can be handed to
cross-validation, while the library's own evaluators and splitters
subclass the protocols explicitly and inherit their failure behavior.

Design Principles:
    - Minimal contracts: one or two operations each
    - Stateless evaluators: score() depends only on its arguments
    - Unimplemented operations fail loudly, naming the operation and class
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray


def abstract_operation(obj: object, operation: str) -> NotImplementedError:
    """Build the error raised when a concrete class lacks an operation."""
    return NotImplementedError(
        f"{operation} has to be implemented in {type(obj).__name__}."
    )


@runtime_checkable
class Evaluator(Protocol):
    """
    A stateless scoring function over ground truth and predictions.

    Classifier, Regressor and ClusterAnalyzer each hold one Evaluator
    instance as their default scorer.
    """

    def score(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        """
        Compare predictions against ground truth.

        Args:
            y_true: Ground truth labels or target values
            y_pred: Predicted labels or target values

        Returns:
            Score as a Python float
        """
        raise abstract_operation(self, 'score')


@runtime_checkable
class Splitter(Protocol):
    """
    Partitions a dataset into train/test index pairs.

    Consumed by cross-validation. Index arrays are int arrays into the
    first dimension of the sample matrix.
    """

    @property
    def n_splits(self) -> int:
        """Number of (train, test) pairs split() returns."""
        raise abstract_operation(self, 'n_splits')

    def split(
        self,
        x: ArrayLike,
        y: ArrayLike | None = None,
    ) -> list[tuple[NDArray[np.intp], NDArray[np.intp]]]:
        """
        Partition sample indices.

        Args:
            x: Sample matrix, shape (n_samples, n_features)
            y: Labels, used by stratified splitters

        Returns:
            List of n_splits (train_indices, test_indices) pairs
        """
        raise abstract_operation(self, 'split')


__all__: list[str] = [
    'Evaluator',
    'Splitter',
    'abstract_operation',
]
