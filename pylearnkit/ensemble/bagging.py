"""
Bootstrap aggregating over a base estimator.

Each ensemble member is a fresh copy of the base estimator fitted on a
bootstrap sample of the training data. Member i draws its bootstrap
indices and its own random_seed from child generator i, forked from the
ensemble's generator before any member is fitted. Members are fitted
through parallel_map, so the fitted ensemble is the same for every n_jobs.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.base import Classifier, Estimator, Regressor
from pylearnkit.core.rng import SEED_MAX, duplicate_rng, fork_rng
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_sample_array,
    check_convert_target_value_array,
    check_n_features,
    check_params_integer,
    check_params_integer_or_none,
    check_params_numeric,
    check_params_positive,
    check_params_range,
    check_sample_size,
)


def _check_base_estimator(estimator: Any, family: type, name: str) -> None:
    if not (isinstance(estimator, Estimator) and isinstance(estimator, family)):
        raise TypeError(
            f"estimator: {name} requires an Estimator that is a {family.__name__}, "
            f"got {type(estimator).__name__}"
        )


class _BaseBagging(Estimator):
    """Shared configuration and member fitting of bagging ensembles."""

    def __init__(
        self,
        estimator: Estimator,
        *,
        n_estimators: int = 10,
        max_samples: float = 1.0,
        n_jobs: int | None = None,
        random_seed: int | None = None,
    ):
        check_params_integer(n_estimators=n_estimators)
        check_params_numeric(max_samples=max_samples)
        check_params_integer_or_none(n_jobs=n_jobs)
        check_params_positive(n_estimators=n_estimators)
        check_params_range(
            'max_samples', max_samples,
            low=0.0, high=1.0, low_inclusive=False,
        )
        super().__init__(
            estimator=estimator,
            n_estimators=n_estimators,
            max_samples=max_samples,
            n_jobs=n_jobs,
            random_seed=random_seed,
        )

    def _fit_members(self, x: NDArray[np.float64], y: NDArray[Any]) -> list[Estimator]:
        n_samples = x.shape[0]
        n_draws = max(1, int(self.params['max_samples'] * n_samples))
        base = self.params['estimator']
        base_params = base.get_params()
        children = fork_rng(duplicate_rng(self.rng), self.params['n_estimators'])

        def fit_member(i: int) -> Estimator:
            rng = children[i]
            ids = rng.integers(0, n_samples, size=n_draws)
            member_params = dict(base_params, random_seed=int(rng.integers(0, SEED_MAX)))
            member = type(base)(**member_params)
            member.capabilities = self.capabilities
            return member.fit(x[ids], y[ids])

        return self.parallel_map(self.params['n_estimators'], fit_member)

    def _predict_members(self, x: ArrayLike) -> tuple[NDArray[np.float64], list[NDArray[Any]]]:
        x = check_convert_sample_array(x)
        check_n_features(x, self.n_features_)
        return x, [member.predict(x) for member in self.estimators_]


class BaggingClassifier(Classifier, _BaseBagging):
    """
    Bagging ensemble of classifiers with majority voting.

    Ties in the vote go to the lowest class label.

    Args:
        estimator: Unfitted Classifier used as the member template
        n_estimators: Number of members
        max_samples: Bootstrap sample size as a fraction of n_samples
        n_jobs: Workers for fitting members (None: sequential,
            <= 0: all processors)
        random_seed: Seed of the ensemble

    Attributes (after fit):
        estimators_: Fitted members
        classes_: Sorted class labels seen in fit
        n_features_: Number of features seen in fit
    """

    def __init__(
        self,
        estimator: Estimator,
        *,
        n_estimators: int = 10,
        max_samples: float = 1.0,
        n_jobs: int | None = None,
        random_seed: int | None = None,
    ):
        _check_base_estimator(estimator, Classifier, 'BaggingClassifier')
        super().__init__(
            estimator,
            n_estimators=n_estimators,
            max_samples=max_samples,
            n_jobs=n_jobs,
            random_seed=random_seed,
        )

    def fit(self, x: ArrayLike, y: ArrayLike) -> BaggingClassifier:
        x = check_convert_sample_array(x)
        y = check_convert_label_array(y)
        check_sample_size(x, y)
        members = self._fit_members(x, y)
        self._set_fitted(
            estimators_=members,
            classes_=np.unique(y),
            n_features_=x.shape[1],
        )
        return self

    def predict_votes(self, x: ArrayLike) -> NDArray[np.int64]:
        """Member votes per class, shape (n_samples, n_classes)."""
        self.check_is_fitted('predict_votes')
        x, predictions = self._predict_members(x)
        votes = np.zeros((x.shape[0], self.classes_.shape[0]), dtype=np.int64)
        rows = np.arange(x.shape[0])
        for pred in predictions:
            np.add.at(votes, (rows, np.searchsorted(self.classes_, pred)), 1)
        return votes

    def predict(self, x: ArrayLike) -> NDArray[np.int32]:
        self.check_is_fitted('predict')
        return self.classes_[self.predict_votes(x).argmax(axis=1)]


class BaggingRegressor(Regressor, _BaseBagging):
    """
    Bagging ensemble of regressors; predictions are the member mean.

    Args:
        estimator: Unfitted Regressor used as the member template
        n_estimators: Number of members
        max_samples: Bootstrap sample size as a fraction of n_samples
        n_jobs: Workers for fitting members
        random_seed: Seed of the ensemble

    Attributes (after fit):
        estimators_: Fitted members
        n_features_: Number of features seen in fit
    """

    def __init__(
        self,
        estimator: Estimator,
        *,
        n_estimators: int = 10,
        max_samples: float = 1.0,
        n_jobs: int | None = None,
        random_seed: int | None = None,
    ):
        _check_base_estimator(estimator, Regressor, 'BaggingRegressor')
        super().__init__(
            estimator,
            n_estimators=n_estimators,
            max_samples=max_samples,
            n_jobs=n_jobs,
            random_seed=random_seed,
        )

    def fit(self, x: ArrayLike, y: ArrayLike) -> BaggingRegressor:
        x = check_convert_sample_array(x)
        y = check_convert_target_value_array(y)
        check_sample_size(x, y)
        self._set_fitted(
            estimators_=self._fit_members(x, y),
            n_features_=x.shape[1],
        )
        return self

    def predict(self, x: ArrayLike) -> NDArray[np.float64]:
        self.check_is_fitted('predict')
        _, predictions = self._predict_members(x)
        return np.mean(predictions, axis=0)
