"""
K-means clustering with Lloyd iterations.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.spatial.distance import cdist

from pylearnkit.base import ClusterAnalyzer, Estimator, Transformer
from pylearnkit.core.exceptions import ValidationError
from pylearnkit.core.rng import duplicate_rng
from pylearnkit.core.validation import (
    check_convert_sample_array,
    check_n_features,
    check_params_choice,
    check_params_integer,
    check_params_nonnegative,
    check_params_numeric,
    check_params_positive,
    check_params_string,
)

INIT_CHOICES = ('k-means++', 'random')


class KMeans(ClusterAnalyzer, Transformer, Estimator):
    """
    Partition samples into n_clusters groups around centroids.

    Each iteration assigns every sample to its nearest center, then moves
    every non-empty cluster's center to the mean of its members. Iteration
    stops once the mean center displacement is <= tol, or after max_iter
    iterations; the latter emits a RuntimeWarning.

    Initial centers are drawn from a copy of the estimator's generator, so
    fitting the same data twice gives the same clustering.

    Args:
        n_clusters: Number of clusters
        init: 'k-means++' (D^2 seeding) or 'random' (distinct samples)
        max_iter: Maximum number of Lloyd iterations
        tol: Convergence threshold on mean center displacement
        random_seed: Seed of the initialization

    Attributes (after fit):
        cluster_centers_: Shape (n_clusters, n_features)
        n_iter_: Iterations run
        converged_: Whether tol was reached within max_iter

    Example:
        >>> x = [[0.0, 0.0], [0.1, 0.0], [5.0, 5.0], [5.1, 5.0]]
        >>> labels = KMeans(n_clusters=2, random_seed=1).fit_predict(x)
        >>> bool(labels[0] == labels[1] and labels[2] == labels[3])
        True
    """

    def __init__(
        self,
        *,
        n_clusters: int = 8,
        init: str = 'k-means++',
        max_iter: int = 50,
        tol: float = 1e-4,
        random_seed: int | None = None,
    ):
        check_params_integer(n_clusters=n_clusters, max_iter=max_iter)
        check_params_numeric(tol=tol)
        check_params_positive(n_clusters=n_clusters, max_iter=max_iter)
        check_params_nonnegative(tol=tol)
        check_params_string(init=init)
        check_params_choice('init', init, INIT_CHOICES)
        super().__init__(
            n_clusters=n_clusters,
            init=init,
            max_iter=max_iter,
            tol=tol,
            random_seed=random_seed,
        )

    def fit(self, x: ArrayLike, y: ArrayLike | None = None) -> KMeans:
        x = check_convert_sample_array(x)
        n_clusters = self.params['n_clusters']
        if x.shape[0] < n_clusters:
            raise ValidationError(
                f"x: requires at least n_clusters={n_clusters} samples, got {x.shape[0]}"
            )

        rng = duplicate_rng(self.rng)
        centers = self._init_centers(x, rng)

        converged = False
        n_iter = 0
        for n_iter in range(1, self.params['max_iter'] + 1):
            labels = _nearest(x, centers)
            old_centers = centers.copy()
            for k in range(n_clusters):
                members = labels == k
                if np.any(members):
                    centers[k] = x[members].mean(axis=0)
            shift = np.sqrt(((old_centers - centers) ** 2).sum(axis=1)).mean()
            if shift <= self.params['tol']:
                converged = True
                break

        if not converged:
            warnings.warn(
                f"KMeans did not converge within max_iter={self.params['max_iter']} "
                f"iterations (tol={self.params['tol']})",
                RuntimeWarning,
                stacklevel=2,
            )

        self._set_fitted(
            cluster_centers_=centers,
            n_iter_=n_iter,
            converged_=converged,
        )
        return self

    def _init_centers(self, x: NDArray[np.float64], rng: np.random.Generator) -> NDArray[np.float64]:
        n_samples = x.shape[0]
        n_clusters = self.params['n_clusters']
        if self.params['init'] == 'random':
            ids = rng.choice(n_samples, size=n_clusters, replace=False)
            return x[ids].copy()

        centers = np.empty((n_clusters, x.shape[1]))
        centers[0] = x[rng.integers(n_samples)]
        for n in range(1, n_clusters):
            min_sq_dist = cdist(x, centers[:n], 'sqeuclidean').min(axis=1)
            total = min_sq_dist.sum()
            if total == 0.0:
                selected = int(rng.integers(n_samples))
            else:
                cum_probs = np.cumsum(min_sq_dist / total)
                selected = int(np.searchsorted(cum_probs, rng.random(), side='right'))
                selected = min(selected, n_samples - 1)
            centers[n] = x[selected]
        return centers

    def predict(self, x: ArrayLike) -> NDArray[np.int32]:
        """Index of the nearest cluster center for each sample."""
        self.check_is_fitted('predict')
        x = check_convert_sample_array(x)
        check_n_features(x, self.cluster_centers_.shape[1])
        return _nearest(x, self.cluster_centers_)

    def fit_predict(self, x: ArrayLike) -> NDArray[np.int32]:
        x = check_convert_sample_array(x)
        return self.fit(x).predict(x)

    def transform(self, x: ArrayLike) -> NDArray[np.float64]:
        """Euclidean distance to every center, shape (n_samples, n_clusters)."""
        self.check_is_fitted('transform')
        x = check_convert_sample_array(x)
        check_n_features(x, self.cluster_centers_.shape[1])
        return cdist(x, self.cluster_centers_, 'euclidean')


def _nearest(x: NDArray[np.float64], centers: NDArray[np.float64]) -> NDArray[np.int32]:
    return cdist(x, centers, 'sqeuclidean').argmin(axis=1).astype(np.int32)
