"""
Estimator contract shared by every algorithm in pylearnkit.

Estimator holds configuration, the random generator and fitted state.
The capability mixins declare what each algorithm family must provide:

    Classifier       fit, predict        score -> Accuracy
    Regressor        fit, predict        score -> R2Score
    ClusterAnalyzer  fit_predict         score -> Purity
    Transformer      fit, transform      fit_transform

Mixins never inherit from one another; each owns its default evaluator
instance and scores through it. A concrete algorithm combines the mixins
it needs with Estimator:

    class Ridge(Regressor, Estimator):
        ...

Fitted state lives in public attributes whose names end with an
underscore (weight_vec_, centers_, ...). They are created only by fit(),
replaced all at once on re-fit, and externalized by marshal_state().
"""

from __future__ import annotations

import importlib
from types import MappingProxyType
from typing import Any, Callable, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.capabilities import (
    CAPABILITY_LINALG,
    CAPABILITY_PARALLEL,
    available_capabilities,
    check_capability,
)
from pylearnkit.core.exceptions import NotFittedError
from pylearnkit.core.parallel import effective_n_jobs, parallel_map
from pylearnkit.core.protocols import Evaluator, abstract_operation
from pylearnkit.core.rng import resolve_seed, rng_from_state, rng_state
from pylearnkit.core.validation import (
    check_convert_label_array,
    check_convert_sample_array,
    check_convert_target_value_array,
    check_params_integer_or_none,
    check_params_nonnegative,
    check_sample_size,
)
from pylearnkit.evaluation.accuracy import Accuracy
from pylearnkit.evaluation.purity import Purity
from pylearnkit.evaluation.r2_score import R2Score

# Version of the dictionary layout produced by Estimator.marshal_state()
STATE_FORMAT_VERSION = 1

_ESTIMATOR_KEY = '__estimator__'


class Estimator:
    """
    Base class for all estimators.

    Args:
        random_seed: Seed of the estimator's generator. None draws one from
            OS entropy once, here, and records it in params.
        **params: Hyperparameters, frozen into a read-only mapping

    Attributes:
        params: Read-only hyperparameter mapping (always has 'random_seed')
        rng: numpy Generator owned by this instance
        capabilities: Optional backends this instance may use
    """

    def __init__(self, *, random_seed: int | None = None, **params: Any):
        check_params_integer_or_none(random_seed=random_seed)
        check_params_nonnegative(random_seed=random_seed)
        params['random_seed'] = resolve_seed(random_seed)
        self._params = MappingProxyType(dict(params))
        self.rng = np.random.default_rng(self._params['random_seed'])
        self.capabilities = available_capabilities()

    # --- Configuration ---

    @property
    def params(self) -> Mapping[str, Any]:
        return self._params

    def get_params(self) -> dict[str, Any]:
        """Copy of the hyperparameters, usable as constructor kwargs."""
        return dict(self._params)

    def clone(self) -> Estimator:
        """Unfitted estimator with identical configuration and seed."""
        return type(self)(**self.get_params())

    # --- Backend capabilities ---

    def enable_linalg(self, warn: bool = True) -> bool:
        """
        True if the SciPy linear algebra backend may be used.

        Never raises: when False the caller takes its numpy path.
        """
        return check_capability(CAPABILITY_LINALG, warn=warn, capabilities=self.capabilities)

    def enable_parallel(self, warn: bool = True) -> bool:
        """
        True if tasks may be dispatched to a worker pool.

        Always False when the estimator has no n_jobs setting or it is None.
        """
        if self._params.get('n_jobs') is None:
            return False
        return check_capability(CAPABILITY_PARALLEL, warn=warn, capabilities=self.capabilities)

    @property
    def n_processes(self) -> int:
        """Worker count parallel_map() will use."""
        if not self.enable_parallel(warn=False):
            return 1
        return effective_n_jobs(self._params['n_jobs'])

    def parallel_map(self, n_tasks: int, func: Callable[[int], Any]) -> list[Any]:
        """
        Run func(i) for i in range(n_tasks), in parallel when enabled.

        Results are index aligned and identical on both paths as long as
        each task draws only from its own forked generator.
        """
        enabled = self.enable_parallel()
        return parallel_map(
            n_tasks, func,
            n_jobs=self._params.get('n_jobs') if enabled else None,
            enabled=enabled,
        )

    # --- Fitted state ---

    @property
    def fitted_attributes(self) -> dict[str, Any]:
        """Learned attributes, by name."""
        return {
            k: v for k, v in vars(self).items()
            if k.endswith('_') and not k.startswith('_')
        }

    @property
    def is_fitted(self) -> bool:
        return bool(self.fitted_attributes)

    def check_is_fitted(self, operation: str) -> None:
        """
        Raises:
            NotFittedError: If fit() has not completed on this instance
        """
        if not self.is_fitted:
            name = type(self).__name__
            raise NotFittedError(
                f"This {name} instance is not fitted yet; "
                f"call 'fit' before '{operation}'.",
                estimator_name=name,
                operation=operation,
            )

    def _set_fitted(self, **attributes: Any) -> None:
        """Replace the whole fitted state with the given attributes."""
        for key in self.fitted_attributes:
            delattr(self, key)
        for key, value in attributes.items():
            if not key.endswith('_'):
                raise ValueError(f"Fitted attribute names must end with '_', got {key!r}")
            setattr(self, key, value)

    # --- Persistence ---

    def marshal_state(self) -> dict[str, Any]:
        """
        Externalize configuration, generator state and fitted state.

        The returned structure holds only plain Python containers, numbers,
        strings and numpy arrays (copied). Nested estimators are marshaled
        recursively.
        """
        cls = type(self)
        return {
            'format_version': STATE_FORMAT_VERSION,
            'estimator': f"{cls.__module__}:{cls.__qualname__}",
            'params': {k: _marshal_value(v) for k, v in self._params.items()},
            'rng_state': rng_state(self.rng),
            'fitted': {k: _marshal_value(v) for k, v in self.fitted_attributes.items()},
        }

    @classmethod
    def restore_state(cls, state: Mapping[str, Any]) -> Estimator:
        """
        Rebuild an independent estimator from marshal_state() output.

        Raises:
            ValueError: If the state has an unsupported format version
            TypeError: If the stored class is not a subclass of cls
        """
        estimator_cls = _resolve_class(state['estimator'])
        if not (isinstance(estimator_cls, type) and issubclass(estimator_cls, cls)):
            raise TypeError(
                f"State describes {state['estimator']!r}, which is not a {cls.__name__}"
            )
        obj = estimator_cls.__new__(estimator_cls)
        obj._restore(state)
        return obj

    def _restore(self, state: Mapping[str, Any]) -> None:
        version = state.get('format_version')
        if version != STATE_FORMAT_VERSION:
            raise ValueError(
                f"Unsupported estimator state format {version!r}, "
                f"expected {STATE_FORMAT_VERSION}"
            )
        self._params = MappingProxyType(
            {k: _restore_value(v) for k, v in state['params'].items()}
        )
        self.rng = rng_from_state(state['rng_state'])
        self.capabilities = available_capabilities()
        for key, value in state['fitted'].items():
            setattr(self, key, _restore_value(value))

    def __getstate__(self) -> dict[str, Any]:
        return self.marshal_state()

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._restore(state)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{type(self).__name__}({args})"


def _marshal_value(value: Any) -> Any:
    if isinstance(value, Estimator):
        return {_ESTIMATOR_KEY: value.marshal_state()}
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, list):
        return [_marshal_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_marshal_value(v) for v in value)
    if isinstance(value, dict):
        return {k: _marshal_value(v) for k, v in value.items()}
    return value


def _restore_value(value: Any) -> Any:
    if isinstance(value, dict):
        if set(value) == {_ESTIMATOR_KEY}:
            return Estimator.restore_state(value[_ESTIMATOR_KEY])
        return {k: _restore_value(v) for k, v in value.items()}
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, list):
        return [_restore_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_restore_value(v) for v in value)
    return value


def _resolve_class(path: str) -> Any:
    module_name, _, qualname = path.partition(':')
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split('.'):
        obj = getattr(obj, part)
    return obj


def _check_fitted(obj: object, operation: str) -> None:
    if isinstance(obj, Estimator):
        obj.check_is_fitted(operation)


# ═══════════════════════════════════════════════════════════════════════
# Capability mixins
# ═══════════════════════════════════════════════════════════════════════


class Classifier:
    """Mixin for classifiers: predicts a Label Vector."""

    default_evaluator: Evaluator = Accuracy()

    def fit(self, x: ArrayLike, y: ArrayLike) -> Classifier:
        raise abstract_operation(self, 'fit')

    def predict(self, x: ArrayLike) -> NDArray[np.int32]:
        raise abstract_operation(self, 'predict')

    def score(self, x: ArrayLike, y: ArrayLike) -> float:
        """
        Mean accuracy on the given test data.

        Args:
            x: Test samples, shape (n_samples, n_features)
            y: True labels, shape (n_samples,)

        Returns:
            count(predict(x) == y) / n_samples
        """
        _check_fitted(self, 'score')
        x = check_convert_sample_array(x)
        y = check_convert_label_array(y)
        check_sample_size(x, y)
        return self.default_evaluator.score(y, self.predict(x))


class Regressor:
    """Mixin for regressors: predicts a Target Array."""

    default_evaluator: Evaluator = R2Score()

    def fit(self, x: ArrayLike, y: ArrayLike) -> Regressor:
        raise abstract_operation(self, 'fit')

    def predict(self, x: ArrayLike) -> NDArray[np.float64]:
        raise abstract_operation(self, 'predict')

    def score(self, x: ArrayLike, y: ArrayLike) -> float:
        """
        Coefficient of determination on the given test data.

        Args:
            x: Test samples, shape (n_samples, n_features)
            y: True targets, shape (n_samples,) or (n_samples, n_outputs)

        Returns:
            R2 averaged over output columns; constant columns score 0.0
        """
        _check_fitted(self, 'score')
        x = check_convert_sample_array(x)
        y = check_convert_target_value_array(y)
        check_sample_size(x, y)
        return self.default_evaluator.score(y, self.predict(x))


class ClusterAnalyzer:
    """Mixin for clustering algorithms: assigns a cluster label per sample."""

    default_evaluator: Evaluator = Purity()

    def fit_predict(self, x: ArrayLike) -> NDArray[np.int32]:
        raise abstract_operation(self, 'fit_predict')

    def score(self, x: ArrayLike, y: ArrayLike) -> float:
        """
        Purity of clustering x against the true labels y.

        The clustering is recomputed with fit_predict(x).
        """
        x = check_convert_sample_array(x)
        y = check_convert_label_array(y)
        check_sample_size(x, y)
        return self.default_evaluator.score(y, self.fit_predict(x))


class Transformer:
    """Mixin for transformers: maps a Sample Matrix to a new representation."""

    def fit(self, x: ArrayLike, y: ArrayLike | None = None) -> Transformer:
        raise abstract_operation(self, 'fit')

    def transform(self, x: ArrayLike) -> NDArray[Any]:
        raise abstract_operation(self, 'transform')

    def fit_transform(self, x: ArrayLike, y: ArrayLike | None = None) -> NDArray[Any]:
        """Equivalent to fit(x, y).transform(x)."""
        fitted = self.fit(x) if y is None else self.fit(x, y)
        return fitted.transform(x)
