"""
Tests for KMeans.
"""

import warnings

import numpy as np
import pytest

from pylearnkit.clustering import KMeans
from pylearnkit.core.exceptions import NotFittedError, RangeError, ValidationError


class TestKMeansFit:

    def test_recovers_blobs(self, classification_data):
        x, y = classification_data
        est = KMeans(n_clusters=3, random_seed=0)
        assert est.score(x, y) == pytest.approx(1.0)
        assert est.converged_
        assert est.cluster_centers_.shape == (3, 2)

    def test_random_init_valid_labels(self, classification_data):
        x, _ = classification_data
        labels = KMeans(n_clusters=3, init='random', random_seed=3).fit_predict(x)
        assert labels.dtype == np.int32
        assert set(np.unique(labels)) <= {0, 1, 2}

    def test_refit_is_reproducible(self, classification_data):
        x, _ = classification_data
        est = KMeans(n_clusters=3, random_seed=7)
        first = est.fit(x).cluster_centers_.copy()
        second = est.fit(x).cluster_centers_
        np.testing.assert_array_equal(first, second)
        np.testing.assert_array_equal(est.clone().fit(x).cluster_centers_, first)

    def test_identical_samples(self):
        x = np.ones((5, 2))
        est = KMeans(n_clusters=2, random_seed=0).fit(x)
        np.testing.assert_array_equal(est.cluster_centers_, np.ones((2, 2)))
        np.testing.assert_array_equal(est.predict(x), np.zeros(5))
        assert est.n_iter_ == 1

    def test_not_converged_warns(self, classification_data):
        x, _ = classification_data
        est = KMeans(n_clusters=3, max_iter=1, tol=0.0, random_seed=0)
        with pytest.warns(RuntimeWarning, match="did not converge"):
            est.fit(x)
        assert not est.converged_
        assert est.n_iter_ == 1

    def test_converged_is_silent(self, classification_data):
        x, _ = classification_data
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            KMeans(n_clusters=3, max_iter=100, random_seed=0).fit(x)


class TestKMeansPredict:

    def test_transform_matches_predict(self, classification_data):
        x, _ = classification_data
        est = KMeans(n_clusters=3, random_seed=0).fit(x)
        distances = est.transform(x)
        assert distances.shape == (90, 3)
        np.testing.assert_array_equal(distances.argmin(axis=1), est.predict(x))

    def test_fit_predict_matches_predict(self, classification_data):
        x, _ = classification_data
        est = KMeans(n_clusters=3, random_seed=0)
        np.testing.assert_array_equal(est.fit_predict(x), est.predict(x))

    def test_predict_before_fit(self):
        with pytest.raises(NotFittedError):
            KMeans().predict([[0.0]])


class TestKMeansValidation:

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="n_clusters=3"):
            KMeans(n_clusters=3).fit([[0.0], [1.0]])

    def test_unknown_init(self):
        with pytest.raises(RangeError, match="init"):
            KMeans(init='forgy')

    def test_non_string_init(self):
        with pytest.raises(TypeError, match="init"):
            KMeans(init=None)

    def test_invalid_counts(self):
        with pytest.raises(RangeError):
            KMeans(n_clusters=0)
        with pytest.raises(TypeError):
            KMeans(max_iter=2.5)
