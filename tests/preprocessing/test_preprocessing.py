"""
Tests for StandardScaler and LabelEncoder.
"""

import numpy as np
import pytest

from pylearnkit.core.exceptions import NotFittedError, ShapeError, ValidationError
from pylearnkit.preprocessing import LabelEncoder, StandardScaler


# ═══════════════════════════════════════════════════════════════════════
# StandardScaler
# ═══════════════════════════════════════════════════════════════════════


class TestStandardScaler:

    def test_reference_values(self):
        z = StandardScaler().fit_transform([[1.0, 10.0], [3.0, 10.0]])
        np.testing.assert_array_equal(z, [[-1.0, 0.0], [1.0, 0.0]])

    def test_zero_mean_unit_variance(self, rng):
        x = rng.normal(loc=5.0, scale=3.0, size=(200, 4))
        z = StandardScaler().fit_transform(x)
        np.testing.assert_allclose(z.mean(axis=0), 0.0, atol=1e-12)
        np.testing.assert_allclose(z.std(axis=0), 1.0, rtol=1e-12)

    def test_constant_column_maps_to_zero(self):
        z = StandardScaler().fit([[2.0], [2.0]]).transform([[2.0], [5.0]])
        np.testing.assert_array_equal(z, [[0.0], [0.0]])
        assert np.all(np.isfinite(z))

    def test_inverse_transform(self, rng):
        x = rng.standard_normal((20, 3)) * 4.0 + 1.0
        scaler = StandardScaler().fit(x)
        np.testing.assert_allclose(scaler.inverse_transform(scaler.transform(x)), x)

    def test_fitted_attributes(self):
        scaler = StandardScaler().fit([[0.0, 1.0], [2.0, 3.0]])
        np.testing.assert_array_equal(scaler.mean_vec_, [1.0, 2.0])
        np.testing.assert_array_equal(scaler.std_vec_, [1.0, 1.0])

    def test_feature_count_checked(self):
        scaler = StandardScaler().fit([[0.0, 1.0], [2.0, 3.0]])
        with pytest.raises(ShapeError, match="expected 2 features"):
            scaler.transform([[0.0, 1.0, 2.0]])

    def test_transform_before_fit(self):
        with pytest.raises(NotFittedError):
            StandardScaler().transform([[0.0]])

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            StandardScaler().fit([['a', 'b']])


# ═══════════════════════════════════════════════════════════════════════
# LabelEncoder
# ═══════════════════════════════════════════════════════════════════════


class TestLabelEncoder:

    def test_string_labels(self):
        encoder = LabelEncoder()
        encoded = encoder.fit_transform(['cat', 'dog', 'cat', 'bird'])
        np.testing.assert_array_equal(encoded, [1, 2, 1, 0])
        assert encoded.dtype == np.int32
        assert encoder.classes_.tolist() == ['bird', 'cat', 'dog']

    def test_integer_labels(self):
        encoded = LabelEncoder().fit_transform([10, -3, 10, 7])
        np.testing.assert_array_equal(encoded, [2, 0, 2, 1])

    def test_inverse_transform(self):
        encoder = LabelEncoder().fit(['b', 'a', 'c'])
        assert encoder.inverse_transform([2, 0, 1]).tolist() == ['c', 'a', 'b']

    def test_unseen_label(self):
        encoder = LabelEncoder().fit(['a', 'b'])
        with pytest.raises(ValidationError, match="not seen in fit: 'z'"):
            encoder.transform(['a', 'z'])

    def test_index_out_of_range(self):
        encoder = LabelEncoder().fit(['a', 'b'])
        with pytest.raises(ValidationError, match=r"\[0, 2\)"):
            encoder.inverse_transform([0, 2])

    def test_incomparable_labels(self):
        with pytest.raises(ValidationError, match="mutually comparable"):
            LabelEncoder().fit([1, 'a', None])

    def test_requires_1d(self):
        with pytest.raises(ShapeError):
            LabelEncoder().fit([['a', 'b']])

    def test_encoded_labels_feed_estimators(self):
        from pylearnkit.evaluation import Accuracy

        encoder = LabelEncoder().fit(['no', 'yes'])
        y_true = encoder.transform(['yes', 'no', 'yes'])
        y_pred = encoder.transform(['yes', 'yes', 'yes'])
        assert Accuracy().score(y_true, y_pred) == pytest.approx(2.0 / 3.0)
