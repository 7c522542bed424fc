"""
Tests for Ridge regression.

Validates:
    - Coefficient recovery on a noiseless-ish linear problem
    - Agreement between the SciPy and numpy solver paths
    - Closed-form weights without a bias term
    - Multi-output targets
    - SingularMatrixError on an unregularized singular system
"""

import numpy as np
import pytest

from pylearnkit.core.exceptions import RangeError, ShapeError, SingularMatrixError
from pylearnkit.linear_model import Ridge


class TestRidgeFit:

    def test_recovers_coefficients(self, regression_data):
        x, y, beta_true = regression_data
        est = Ridge(reg_param=1e-8).fit(x, y)
        np.testing.assert_allclose(est.weight_vec_, beta_true, atol=1e-2)
        assert est.bias_term_ == pytest.approx(2.0, abs=1e-2)
        assert isinstance(est.bias_term_, float)

    def test_closed_form_without_bias(self, rng):
        x = rng.standard_normal((30, 4))
        y = rng.standard_normal(30)
        est = Ridge(reg_param=2.5, fit_bias=False).fit(x, y)
        expected = np.linalg.solve(x.T @ x + 2.5 * np.eye(4), x.T @ y)
        np.testing.assert_allclose(est.weight_vec_, expected, rtol=1e-10)
        assert est.bias_term_ == 0.0

    def test_regularization_shrinks_weights(self, regression_data):
        x, y, _ = regression_data
        weak = Ridge(reg_param=0.01).fit(x, y)
        strong = Ridge(reg_param=100.0).fit(x, y)
        assert np.linalg.norm(strong.weight_vec_) < np.linalg.norm(weak.weight_vec_)

    def test_bias_scale_irrelevant_without_penalty(self, regression_data):
        x, y, _ = regression_data
        a = Ridge(reg_param=0.0, bias_scale=1.0).fit(x, y)
        b = Ridge(reg_param=0.0, bias_scale=10.0).fit(x, y)
        np.testing.assert_allclose(a.predict(x), b.predict(x), rtol=1e-8)

    def test_multi_output(self, regression_data):
        x, y, beta_true = regression_data
        y2 = np.column_stack([y, -y])
        est = Ridge(reg_param=1e-8).fit(x, y2)
        assert est.weight_vec_.shape == (2, 3)
        assert est.bias_term_.shape == (2,)
        np.testing.assert_allclose(est.weight_vec_[0], -est.weight_vec_[1], atol=1e-10)
        np.testing.assert_allclose(est.weight_vec_[0], beta_true, atol=1e-2)
        assert est.predict(x).shape == (100, 2)

    def test_predict(self, regression_data):
        x, y, _ = regression_data
        est = Ridge(reg_param=1e-8).fit(x, y)
        np.testing.assert_allclose(est.predict(x), y, atol=0.05)


class TestRidgeBackends:

    def test_paths_agree(self, regression_data, all_capabilities, no_capabilities):
        x, y, _ = regression_data
        fast = Ridge(reg_param=0.5)
        fast.capabilities = all_capabilities
        slow = Ridge(reg_param=0.5)
        slow.capabilities = no_capabilities
        fast.fit(x, y)
        slow.fit(x, y)
        assert fast.backend_ == 'scipy'
        assert slow.backend_ == 'numpy'
        np.testing.assert_allclose(fast.weight_vec_, slow.weight_vec_, rtol=1e-10)
        assert fast.bias_term_ == pytest.approx(slow.bias_term_, rel=1e-10)

    @pytest.mark.parametrize("use_scipy", [True, False])
    def test_singular_system(self, use_scipy, all_capabilities, no_capabilities):
        x = np.array([[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
        est = Ridge(reg_param=0.0, fit_bias=False)
        est.capabilities = all_capabilities if use_scipy else no_capabilities
        with pytest.raises(SingularMatrixError):
            est.fit(x, [1.0, 2.0, 3.0])


class TestRidgeValidation:

    def test_invalid_params(self):
        with pytest.raises(RangeError):
            Ridge(reg_param=-1.0)
        with pytest.raises(RangeError):
            Ridge(bias_scale=0.0)
        with pytest.raises(TypeError):
            Ridge(fit_bias='yes')

    def test_feature_count_checked(self, regression_data):
        x, y, _ = regression_data
        est = Ridge().fit(x, y)
        with pytest.raises(ShapeError):
            est.predict(x[:, :2])
