"""
Standardization of features to zero mean and unit variance.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.base import Estimator, Transformer
from pylearnkit.core.compute.precision import safe_divide
from pylearnkit.core.validation import check_convert_sample_array, check_n_features


class StandardScaler(Transformer, Estimator):
    """
    Standardize each feature column.

        z = (x - mean) / std

    std is the population standard deviation (ddof=0). Columns with zero
    variance are mapped to 0.0 rather than divided by zero.

    Attributes (after fit):
        mean_vec_: Column means, shape (n_features,)
        std_vec_: Column standard deviations, shape (n_features,)

    Example:
        >>> scaler = StandardScaler()
        >>> scaler.fit_transform([[1.0, 10.0], [3.0, 10.0]])
        array([[-1.,  0.],
               [ 1.,  0.]])
    """

    def __init__(self, *, random_seed: int | None = None):
        super().__init__(random_seed=random_seed)

    def fit(self, x: ArrayLike, y: ArrayLike | None = None) -> StandardScaler:
        x = check_convert_sample_array(x)
        self._set_fitted(
            mean_vec_=x.mean(axis=0),
            std_vec_=x.std(axis=0),
        )
        return self

    def transform(self, x: ArrayLike) -> NDArray[np.float64]:
        self.check_is_fitted('transform')
        x = check_convert_sample_array(x)
        check_n_features(x, self.mean_vec_.shape[0])
        return safe_divide(x - self.mean_vec_, np.broadcast_to(self.std_vec_, x.shape))

    def inverse_transform(self, z: ArrayLike) -> NDArray[np.float64]:
        """Map standardized values back to the original scale."""
        self.check_is_fitted('inverse_transform')
        z = check_convert_sample_array(z, 'z')
        check_n_features(z, self.mean_vec_.shape[0], 'z')
        return z * self.std_vec_ + self.mean_vec_
