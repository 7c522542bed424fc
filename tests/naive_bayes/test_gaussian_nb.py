"""
Tests for GaussianNB.
"""

import numpy as np
import pytest
from scipy.stats import norm

from pylearnkit.core.exceptions import NotFittedError, RangeError, ShapeError
from pylearnkit.naive_bayes import GaussianNB


class TestGaussianNBFit:

    def test_class_statistics(self):
        x = np.array([[0.0], [2.0], [10.0], [14.0]])
        est = GaussianNB(var_smoothing=1e-12).fit(x, [0, 0, 1, 1])
        np.testing.assert_array_equal(est.classes_, [0, 1])
        np.testing.assert_allclose(est.class_priors_, [0.5, 0.5])
        np.testing.assert_allclose(est.means_, [[1.0], [12.0]])
        np.testing.assert_allclose(est.variances_, [[1.0], [4.0]])

    def test_smoothing_keeps_constant_features_finite(self):
        x = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 5.0], [1.0, 6.0]])
        est = GaussianNB().fit(x, [0, 0, 1, 1])
        assert np.all(est.variances_ > 0.0)
        assert np.all(np.isfinite(est.predict_log_proba(x)))

    def test_blobs_accuracy(self, classification_data):
        x, y = classification_data
        est = GaussianNB().fit(x, y)
        assert est.score(x, y) >= 0.95


class TestGaussianNBPredict:

    def test_decision_function_matches_normal_pdf(self):
        x = np.array([[0.0], [2.0], [10.0], [14.0]])
        est = GaussianNB(var_smoothing=1e-12).fit(x, [0, 0, 1, 1])
        joint = est.decision_function([[3.0]])
        expected = [
            np.log(0.5) + norm.logpdf(3.0, loc=1.0, scale=1.0),
            np.log(0.5) + norm.logpdf(3.0, loc=12.0, scale=2.0),
        ]
        np.testing.assert_allclose(joint[0], expected)

    def test_proba_rows_sum_to_one(self, classification_data):
        x, y = classification_data
        proba = GaussianNB().fit(x, y).predict_proba(x)
        assert proba.shape == (90, 3)
        np.testing.assert_allclose(proba.sum(axis=1), 1.0)

    def test_predict_is_argmax(self, classification_data):
        x, y = classification_data
        est = GaussianNB().fit(x, y)
        np.testing.assert_array_equal(
            est.predict(x), est.classes_[est.predict_proba(x).argmax(axis=1)]
        )

    def test_non_contiguous_labels(self):
        x = np.array([[0.0], [0.5], [9.0], [9.5]])
        est = GaussianNB().fit(x, [3, 3, 7, 7])
        np.testing.assert_array_equal(est.predict([[0.2], [9.2]]), [3, 7])

    def test_predict_before_fit(self):
        with pytest.raises(NotFittedError):
            GaussianNB().predict([[0.0]])

    def test_feature_count_checked(self, classification_data):
        x, y = classification_data
        est = GaussianNB().fit(x, y)
        with pytest.raises(ShapeError):
            est.predict(x[:, :1])

    def test_negative_smoothing(self):
        with pytest.raises(RangeError):
            GaussianNB(var_smoothing=-1.0)

    def test_zero_smoothing_rejected(self):
        with pytest.raises(RangeError, match="var_smoothing"):
            GaussianNB(var_smoothing=0.0)

    def test_feature_constant_within_each_class(self):
        x = np.array([[0.0, 1.0], [0.0, 2.0], [1.0, 5.0], [1.0, 6.0]])
        est = GaussianNB().fit(x, [0, 0, 1, 1])
        proba = est.predict_proba(x)
        assert np.all(np.isfinite(proba))
        np.testing.assert_allclose(proba.sum(axis=1), 1.0)
        np.testing.assert_array_equal(est.predict(x), [0, 0, 1, 1])
