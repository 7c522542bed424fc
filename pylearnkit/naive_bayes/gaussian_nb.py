"""
Gaussian naive Bayes classifier.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import logsumexp

from pylearnkit.base import Classifier, Estimator
from pylearnkit.core.compute.precision import safe_log
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_sample_array,
    check_n_features,
    check_params_positive,
    check_params_numeric,
    check_sample_size,
)


class GaussianNB(Classifier, Estimator):
    """
    Naive Bayes with per-class, per-feature normal likelihoods.

    The joint log likelihood of sample x under class c is

        log P(c) - 0.5 * sum_j [ log(2 pi var_cj) + (x_j - mean_cj)^2 / var_cj ]

    Args:
        var_smoothing: Fraction of the largest feature variance added to
            every class variance, keeping constant features finite.
            Must be positive
        random_seed: Seed recorded with the configuration

    Attributes (after fit):
        classes_: Sorted class labels, int32
        class_priors_: Relative class frequencies, shape (n_classes,)
        means_: Shape (n_classes, n_features)
        variances_: Shape (n_classes, n_features), smoothing included
    """

    def __init__(self, *, var_smoothing: float = 1e-9, random_seed: int | None = None):
        check_params_numeric(var_smoothing=var_smoothing)
        check_params_positive(var_smoothing=var_smoothing)
        super().__init__(var_smoothing=var_smoothing, random_seed=random_seed)

    def fit(self, x: ArrayLike, y: ArrayLike) -> GaussianNB:
        x = check_convert_sample_array(x)
        y = check_convert_label_array(y)
        check_sample_size(x, y)

        classes = np.unique(y)
        n_samples = x.shape[0]
        priors = np.array([np.count_nonzero(y == c) / n_samples for c in classes])
        means = np.vstack([x[y == c].mean(axis=0) for c in classes])
        variances = np.vstack([x[y == c].var(axis=0) for c in classes])

        epsilon = self.params['var_smoothing'] * float(x.var(axis=0).max())
        if epsilon == 0.0:
            epsilon = self.params['var_smoothing']
        variances = variances + epsilon

        self._set_fitted(
            classes_=classes,
            class_priors_=priors,
            means_=means,
            variances_=variances,
        )
        return self

    def decision_function(self, x: ArrayLike) -> NDArray[np.float64]:
        """Joint log likelihood per class, shape (n_samples, n_classes)."""
        self.check_is_fitted('decision_function')
        x = check_convert_sample_array(x)
        check_n_features(x, self.means_.shape[1])

        log_priors = safe_log(self.class_priors_)
        diff = x[:, np.newaxis, :] - self.means_[np.newaxis, :, :]
        log_norm = np.log(2.0 * np.pi * self.variances_).sum(axis=1)
        mahalanobis = (diff ** 2 / self.variances_[np.newaxis, :, :]).sum(axis=2)
        return log_priors - 0.5 * (log_norm + mahalanobis)

    def predict(self, x: ArrayLike) -> NDArray[np.int32]:
        self.check_is_fitted('predict')
        scores = self.decision_function(x)
        return self.classes_[scores.argmax(axis=1)]

    def predict_log_proba(self, x: ArrayLike) -> NDArray[np.float64]:
        """Log posterior class probabilities, shape (n_samples, n_classes)."""
        self.check_is_fitted('predict_log_proba')
        scores = self.decision_function(x)
        return scores - logsumexp(scores, axis=1, keepdims=True)

    def predict_proba(self, x: ArrayLike) -> NDArray[np.float64]:
        """Posterior class probabilities; rows sum to one."""
        self.check_is_fitted('predict_proba')
        return np.exp(self.predict_log_proba(x))
