"""
Core infrastructure for pylearnkit.

This module provides the shared contract layer used by every estimator
family (classifiers, regressors, clustering, transformers, ensembles).

Key components:
    protocols: Evaluator, Splitter protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Boundary conversions and hyperparameter checks
    capabilities: Optional backend registry (linalg, parallel)
    rng: Seeded, forkable random number generation
    parallel: Fork-join dispatch of independent tasks
    compute: Timing, safe arithmetic, linear algebra kernels
"""

from pylearnkit.core.protocols import Evaluator, Splitter
from pylearnkit.core.result import Result
from pylearnkit.core.exceptions import (
    PyLearnKitError,
    ValidationError,
    ShapeError,
    SizeMismatchError,
    RangeError,
    NotFittedError,
    NumericalError,
    SingularMatrixError,
    BackendUnavailableWarning,
)

__all__ = [
    # Protocols
    "Evaluator",
    "Splitter",
    # Result
    "Result",
    # Exceptions
    "PyLearnKitError",
    "ValidationError",
    "ShapeError",
    "SizeMismatchError",
    "RangeError",
    "NotFittedError",
    "NumericalError",
    "SingularMatrixError",
    "BackendUnavailableWarning",
]
