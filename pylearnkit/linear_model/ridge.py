"""
Ridge regression solved in closed form.

The normal equations

    (X'X + reg_param * I) w = X'y

are symmetric positive definite for reg_param > 0. With the linalg
capability they are solved through SciPy's Cholesky driver, otherwise
through numpy.linalg.solve. Both paths yield the same weights.

When fit_bias is set, a constant column of value bias_scale is appended
to X and regularized together with the other weights.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.base import Estimator, Regressor
from pylearnkit.core.compute.linalg import solve_symmetric
from pylearnkit.core.validation import (
    check_convert_sample_array,
    check_convert_target_value_array,
    check_n_features,
    check_params_boolean,
    check_params_nonnegative,
    check_params_numeric,
    check_params_positive,
    check_sample_size,
)


class Ridge(Regressor, Estimator):
    """
    Linear least squares with L2 regularization.

    Args:
        reg_param: Regularization strength (>= 0)
        fit_bias: Learn an intercept term
        bias_scale: Value of the constant column appended for the intercept
        random_seed: Seed recorded with the configuration

    Attributes (after fit):
        weight_vec_: Shape (n_features,) for 1-D targets,
            (n_outputs, n_features) for 2-D targets
        bias_term_: float for 1-D targets, shape (n_outputs,) otherwise
        backend_: 'scipy' or 'numpy', the path that solved the system

    Raises:
        SingularMatrixError: From fit(), when reg_param is 0 and X'X is
            singular
    """

    def __init__(
        self,
        *,
        reg_param: float = 1.0,
        fit_bias: bool = True,
        bias_scale: float = 1.0,
        random_seed: int | None = None,
    ):
        check_params_numeric(reg_param=reg_param, bias_scale=bias_scale)
        check_params_boolean(fit_bias=fit_bias)
        check_params_nonnegative(reg_param=reg_param)
        check_params_positive(bias_scale=bias_scale)
        super().__init__(
            reg_param=reg_param,
            fit_bias=fit_bias,
            bias_scale=bias_scale,
            random_seed=random_seed,
        )

    def fit(self, x: ArrayLike, y: ArrayLike) -> Ridge:
        x = check_convert_sample_array(x)
        y = check_convert_target_value_array(y)
        check_sample_size(x, y)

        n_features = x.shape[1]
        if self.params['fit_bias']:
            bias_col = np.full((x.shape[0], 1), self.params['bias_scale'])
            x = np.hstack([x, bias_col])

        gram = x.T @ x + self.params['reg_param'] * np.eye(x.shape[1])
        result = solve_symmetric(gram, x.T @ y, use_backend=self.enable_linalg(warn=False))
        w = result.solution

        if self.params['fit_bias']:
            weight_vec = w[:n_features]
            bias_term = w[n_features] * self.params['bias_scale']
        else:
            weight_vec = w
            bias_term = 0.0 if y.ndim == 1 else np.zeros(y.shape[1])

        if y.ndim == 1:
            bias_term = float(bias_term)
        else:
            weight_vec = weight_vec.T.copy()

        self._set_fitted(
            weight_vec_=weight_vec,
            bias_term_=bias_term,
            backend_=result.backend,
        )
        return self

    def predict(self, x: ArrayLike) -> NDArray[np.float64]:
        self.check_is_fitted('predict')
        x = check_convert_sample_array(x)
        n_features = self.weight_vec_.shape[-1]
        check_n_features(x, n_features)
        return x @ self.weight_vec_.T + self.bias_term_
