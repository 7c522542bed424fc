"""
CrossValidationDesign: validated inputs of a cross-validation run.

Immutable after construction. Build it with for_cross_validation(), which
converts x and y at the boundary so every fold slices well-formed arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.base import Classifier, ClusterAnalyzer, Estimator
from pylearnkit.core.protocols import Evaluator, Splitter
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_sample_array,
    check_convert_target_value_array,
    check_params_boolean,
    check_params_integer_or_none,
    check_sample_size,
)


@dataclass(frozen=True)
class CrossValidationDesign:
    """
    Design for cross-validation.

    Do not construct directly; use for_cross_validation().
    """
    estimator: Estimator
    x: NDArray[np.float64]
    y: NDArray[Any]
    splitter: Splitter
    evaluator: Evaluator | None
    return_train_score: bool
    n_jobs: int | None

    @classmethod
    def for_cross_validation(
        cls,
        estimator: Estimator,
        x: ArrayLike,
        y: ArrayLike,
        splitter: Splitter,
        *,
        evaluator: Evaluator | None = None,
        return_train_score: bool = False,
        n_jobs: int | None = None,
    ) -> CrossValidationDesign:
        """
        Validate the inputs of cross_validate().

        y is converted to a Label Vector for classifiers and cluster
        analyzers, and to a Target Array otherwise.

        Raises:
            TypeError: If estimator, splitter or evaluator do not satisfy
                their contracts
            ValidationError: If x or y are malformed or differ in length
        """
        if not isinstance(estimator, Estimator):
            raise TypeError(
                f"estimator: expected an Estimator, got {type(estimator).__name__}"
            )
        if not isinstance(splitter, Splitter):
            raise TypeError(
                f"splitter: expected a Splitter with n_splits and split(), "
                f"got {type(splitter).__name__}"
            )
        if evaluator is not None and not isinstance(evaluator, Evaluator):
            raise TypeError(
                f"evaluator: expected an Evaluator with score(), "
                f"got {type(evaluator).__name__}"
            )
        check_params_boolean(return_train_score=return_train_score)
        check_params_integer_or_none(n_jobs=n_jobs)

        x_arr = check_convert_sample_array(x)
        if isinstance(estimator, (Classifier, ClusterAnalyzer)):
            y_arr = check_convert_label_array(y)
        else:
            y_arr = check_convert_target_value_array(y)
        check_sample_size(x_arr, y_arr)

        return cls(
            estimator=estimator,
            x=x_arr,
            y=y_arr,
            splitter=splitter,
            evaluator=evaluator,
            return_train_score=return_train_score,
            n_jobs=n_jobs,
        )

    @property
    def n_samples(self) -> int:
        return self.x.shape[0]
