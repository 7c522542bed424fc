"""
Cross-validation of an estimator over the folds of a splitter.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pylearnkit.base import Estimator
from pylearnkit.core.capabilities import CAPABILITY_PARALLEL, check_capability
from pylearnkit.core.compute.timing import Timer, timed_call
from pylearnkit.core.parallel import effective_n_jobs, parallel_map
from pylearnkit.core.protocols import Evaluator, Splitter
from pylearnkit.core.result import Result
from pylearnkit.evaluation.log_loss import LogLoss
from pylearnkit.model_selection._common import CVParams
from pylearnkit.model_selection.design import CrossValidationDesign
from pylearnkit.model_selection.solution import CrossValidationSolution


def _score(
    estimator: Estimator,
    evaluator: Evaluator | None,
    x: np.ndarray,
    y: np.ndarray,
) -> float:
    if evaluator is None:
        return float(estimator.score(x, y))
    if isinstance(evaluator, LogLoss):
        labels = getattr(estimator, 'classes_', None)
        return float(evaluator.score(y, estimator.predict_proba(x), labels=labels))
    return float(evaluator.score(y, estimator.predict(x)))


def _evaluator_name(design: CrossValidationDesign) -> str:
    if design.evaluator is not None:
        return type(design.evaluator).__name__
    default = getattr(design.estimator, 'default_evaluator', None)
    if default is not None:
        return type(default).__name__
    return 'score'


def cross_validate(
    estimator: Estimator | CrossValidationDesign,
    x: ArrayLike | None = None,
    y: ArrayLike | None = None,
    splitter: Splitter | None = None,
    *,
    evaluator: Evaluator | None = None,
    return_train_score: bool = False,
    n_jobs: int | None = None,
) -> CrossValidationSolution:
    """
    Evaluate an estimator on every (train, test) pair of a splitter.

    Each fold fits a clone of the estimator, so the estimator passed in
    is left untouched and folds are independent of each other. Folds run
    through parallel_map and the report is the same for every n_jobs.

    Parameters
    ----------
    estimator : Estimator or CrossValidationDesign
        Estimator to evaluate, or a prebuilt design (other arguments are
        then ignored).
    x : array-like
        Sample matrix, shape (n_samples, n_features).
    y : array-like
        Labels or target values, shape (n_samples,) or (n_samples, n_outputs).
    splitter : Splitter
        Produces the (train, test) index pairs.
    evaluator : Evaluator or None
        Scoring function applied to (y_test, predict(x_test)); LogLoss is
        applied to predict_proba(x_test) instead. None uses the
        estimator's own score().
    return_train_score : bool
        Also score each fitted clone on its training fold.
    n_jobs : int or None
        Workers for running folds. None runs them sequentially; <= 0 uses
        all processors.

    Returns
    -------
    CrossValidationSolution
        test_score, train_score and fit_time per fold, plus summary().
    """
    if isinstance(estimator, CrossValidationDesign):
        design = estimator
    else:
        if splitter is None:
            raise TypeError("splitter: cross_validate requires a Splitter")
        design = CrossValidationDesign.for_cross_validation(
            estimator, x, y, splitter,
            evaluator=evaluator,
            return_train_score=return_train_score,
            n_jobs=n_jobs,
        )

    def run_fold(k: int) -> tuple[float, float | None, float]:
        train_ids, test_ids = folds[k]
        model = design.estimator.clone()
        model.capabilities = design.estimator.capabilities
        x_train, y_train = design.x[train_ids], design.y[train_ids]
        x_test, y_test = design.x[test_ids], design.y[test_ids]

        _, fit_seconds = timed_call(model.fit, x_train, y_train)

        test_score = _score(model, design.evaluator, x_test, y_test)
        train_score = None
        if design.return_train_score:
            train_score = _score(model, design.evaluator, x_train, y_train)
        return test_score, train_score, fit_seconds

    with Timer() as timer:
        with timer.section('split'):
            folds = design.splitter.split(design.x, design.y)

        use_parallel = (
            design.n_jobs is not None
            and check_capability(CAPABILITY_PARALLEL)
            and effective_n_jobs(design.n_jobs) > 1
            and len(folds) > 1
        )
        with timer.section('folds'):
            reports: list[Any] = parallel_map(
                len(folds), run_fold,
                n_jobs=design.n_jobs,
                enabled=use_parallel,
            )

    test_score = np.array([r[0] for r in reports], dtype=np.float64)
    train_score = None
    if design.return_train_score:
        train_score = np.array([r[1] for r in reports], dtype=np.float64)
    fit_time = np.array([r[2] for r in reports], dtype=np.float64)

    warn_list = []
    n_bad = int(np.count_nonzero(~np.isfinite(test_score)))
    if n_bad:
        warn_list.append(f"{n_bad} of {len(folds)} test scores are not finite")

    result = Result(
        params=CVParams(
            test_score=test_score,
            train_score=train_score,
            fit_time=fit_time,
        ),
        info={
            'estimator': type(design.estimator).__name__,
            'splitter': type(design.splitter).__name__,
            'evaluator': _evaluator_name(design),
            'n_splits': len(folds),
            'n_samples': design.n_samples,
        },
        timing=timer.result(),
        backend_name='joblib' if use_parallel else 'sequential',
        warnings=tuple(warn_list),
    )
    return CrossValidationSolution(_result=result, _design=design)
