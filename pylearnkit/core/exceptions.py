"""
Errors raised by pylearnkit.

Every error derives from PyLearnKitError. Input problems are
ValidationErrors raised at the estimator boundary; numeric failures inside
a fit are NumericalErrors; calling an operation that needs a fitted model
too early is a NotFittedError.

Each exception stores the offending names and values as attributes, and
its message states what was received and what was expected.
"""

from __future__ import annotations


class PyLearnKitError(Exception):
    """Base exception for all pylearnkit errors."""
    pass


class ValidationError(PyLearnKitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks at an
    estimator boundary, before any numeric computation begins.
    """
    pass


class ShapeError(ValidationError):
    """
    Array has the wrong number of dimensions or a ragged structure.

    Attributes:
        name: Parameter name of the offending array
        expected_ndim: Accepted dimensionalities, e.g. (2,) or (1, 2)
        actual_ndim: Dimensionality of the array that was received
        actual_shape: Shape of the array that was received
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        expected_ndim: tuple[int, ...] | None = None,
        actual_ndim: int | None = None,
        actual_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.expected_ndim = expected_ndim
        self.actual_ndim = actual_ndim
        self.actual_shape = actual_shape


class SizeMismatchError(ValidationError):
    """
    Co-arguments disagree on the number of samples.

    Raised when the leading dimension of two or more arrays passed to the
    same operation differ. Sizes are never truncated or broadcast.

    Attributes:
        sizes: Mapping from parameter name to its leading dimension
    """

    def __init__(self, message: str, sizes: dict[str, int] | None = None):
        super().__init__(message)
        self.sizes = dict(sizes) if sizes is not None else {}


class RangeError(ValidationError, ValueError):
    """
    A configuration value is outside its permitted range or choice set.

    Attributes:
        param: Name of the hyperparameter
        value: Value that was supplied
        constraint: Human-readable description of what is allowed
    """

    def __init__(
        self,
        message: str,
        param: str | None = None,
        value: object = None,
        constraint: str | None = None,
    ):
        super().__init__(message)
        self.param = param
        self.value = value
        self.constraint = constraint


class NotFittedError(PyLearnKitError, RuntimeError):
    """
    An operation that needs fitted state was called before fit().

    Attributes:
        estimator_name: Class name of the estimator
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        estimator_name: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.estimator_name = estimator_name
        self.operation = operation


class NumericalError(PyLearnKitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a linear solve requires invertibility but the system
    matrix is singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        backend: Name of the solver path that failed ('scipy' or 'numpy')
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        backend: str | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.backend = backend


class BackendUnavailableWarning(UserWarning):
    """
    An optional numeric backend is missing or too old.

    Emitted instead of an error: the caller proceeds on the sequential
    or pure-numpy path.
    """
    pass
