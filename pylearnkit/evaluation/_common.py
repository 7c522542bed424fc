"""
Shared argument handling for evaluators.

Every evaluator validates its (y_true, y_pred) pair the same way before
computing anything: both arrays go through the boundary conversions and
must agree on n_samples.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import ShapeError
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_target_value_array,
    check_sample_size,
)


def check_label_pair(
    y_true: ArrayLike,
    y_pred: ArrayLike,
) -> tuple[NDArray[np.int32], NDArray[np.int32]]:
    """Convert a ground truth / prediction pair of Label Vectors."""
    y_true = check_convert_label_array(y_true, 'y_true')
    y_pred = check_convert_label_array(y_pred, 'y_pred')
    check_sample_size(y_true, y_pred, names=('y_true', 'y_pred'))
    return y_true, y_pred


def check_target_pair(
    y_true: ArrayLike,
    y_pred: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Convert a ground truth / prediction pair of Target Arrays.

    Raises:
        ShapeError: If the two arrays do not have identical shapes
    """
    y_true = check_convert_target_value_array(y_true, 'y_true')
    y_pred = check_convert_target_value_array(y_pred, 'y_pred')
    check_sample_size(y_true, y_pred, names=('y_true', 'y_pred'))
    if y_true.shape != y_pred.shape:
        raise ShapeError(
            f"y_pred: expected shape {y_true.shape} to match y_true, got {y_pred.shape}",
            name='y_pred',
            expected_ndim=(y_true.ndim,),
            actual_ndim=y_pred.ndim,
            actual_shape=y_pred.shape,
        )
    return y_true, y_pred
