"""
Input validation utilities for pylearnkit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Every estimator boundary runs its raw inputs through one of the
check_convert_* functions and uses the returned array downstream:

    Sample Matrix   float64, 2-D, at least one row and one column
    Label Vector    int32,   1-D, at least one element
    Target Array    float64, 1-D or 2-D, at least one row

Design principles:
    - Only value-preserving casts (int -> float, integral float -> int32)
    - Element kinds are tagged once here; nothing downstream duck-types
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import enum
import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.core.exceptions import (
    RangeError,
    ShapeError,
    SizeMismatchError,
    ValidationError,
)


class ElementKind(enum.Enum):
    """Tag describing what kind of elements an array-like holds."""
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOATING = 'floating'
    COMPLEX = 'complex'
    STRING = 'string'
    OBJECT = 'object'
    OTHER = 'other'


NUMERIC_KINDS = frozenset({ElementKind.INTEGER, ElementKind.FLOATING})

_INT32_MIN = np.iinfo(np.int32).min
_INT32_MAX = np.iinfo(np.int32).max


def element_kind(array: NDArray[Any]) -> ElementKind:
    """
    Classify the element type of an ndarray.

    Args:
        array: Array to classify

    Returns:
        The ElementKind tag for array.dtype
    """
    dtype = array.dtype
    if dtype == object:
        return ElementKind.OBJECT
    if np.issubdtype(dtype, np.bool_):
        return ElementKind.BOOLEAN
    if np.issubdtype(dtype, np.integer):
        return ElementKind.INTEGER
    if np.issubdtype(dtype, np.floating):
        return ElementKind.FLOATING
    if np.issubdtype(dtype, np.complexfloating):
        return ElementKind.COMPLEX
    if np.issubdtype(dtype, np.str_) or np.issubdtype(dtype, np.bytes_):
        return ElementKind.STRING
    return ElementKind.OTHER


def as_ndarray(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Convert an array-like to ndarray without changing its dtype.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        numpy.ndarray

    Raises:
        ShapeError: If the input is a ragged nested sequence
        ValidationError: If the input cannot be converted at all
    """
    try:
        return np.asarray(array)
    except ValueError as e:
        raise ShapeError(
            f"{name}: ragged nested sequence cannot form an array: {e}",
            name=name,
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e


def check_array(
    array: ArrayLike,
    name: str,
    dtype: type = np.float64,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and any dtype that is not integer or floating point.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target dtype of the returned array

    Returns:
        numpy.ndarray with the requested dtype

    Raises:
        ShapeError: If input is ragged
        ValidationError: If input cannot be converted to numeric array
    """
    result = as_ndarray(array, name)
    kind = element_kind(result)

    if kind is ElementKind.OBJECT:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if kind not in NUMERIC_KINDS:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.dtype != dtype:
        result = result.astype(dtype)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(
    array: NDArray[Any],
    ndim: int | tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has one of the accepted numbers of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions, or a tuple of accepted values
        name: Parameter name for error messages

    Raises:
        ShapeError: If array has wrong number of dimensions
    """
    accepted = (ndim,) if isinstance(ndim, int) else tuple(ndim)
    if array.ndim not in accepted:
        expected = " or ".join(f"{d}D" for d in accepted)
        raise ShapeError(
            f"{name}: expected {expected} array, got {array.ndim}D with shape {array.shape}",
            name=name,
            expected_ndim=accepted,
            actual_ndim=array.ndim,
            actual_shape=array.shape,
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        SizeMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise SizeMismatchError(
            f"Inconsistent lengths: {details}",
            sizes=dict(zip(names, lengths)),
        )


def check_min_samples(array: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


# ═══════════════════════════════════════════════════════════════════════
# Estimator boundary conversions
# ═══════════════════════════════════════════════════════════════════════


def check_convert_sample_array(x: ArrayLike, name: str = 'x') -> NDArray[np.float64]:
    """
    Convert input to a Sample Matrix.

    Args:
        x: Array-like of shape (n_samples, n_features)
        name: Parameter name for error messages

    Returns:
        float64 array of shape (n_samples, n_features)

    Raises:
        ShapeError: If x is not 2-D or is ragged
        ValidationError: If x is non-numeric, holds NaN or Inf, or has no rows
            or columns
    """
    x = check_array(x, name, dtype=np.float64)
    check_2d(x, name)
    check_min_samples(x, 1, name)
    check_finite(x, name)
    if x.shape[1] < 1:
        raise ValidationError(
            f"{name}: requires at least 1 feature, got 0"
        )
    return x


def check_convert_label_array(y: ArrayLike, name: str = 'y') -> NDArray[np.int32]:
    """
    Convert input to a Label Vector.

    Integer inputs are cast to int32. Floating inputs are accepted only
    when every value is integral. Strings are rejected: they must be
    encoded first (see pylearnkit.preprocessing.LabelEncoder).

    Args:
        y: Array-like of shape (n_samples,)
        name: Parameter name for error messages

    Returns:
        int32 array of shape (n_samples,)

    Raises:
        ShapeError: If y is not 1-D or is ragged
        ValidationError: If y is non-numeric, non-integral, empty or
            outside the int32 range
    """
    arr = as_ndarray(y, name)
    kind = element_kind(arr)

    if kind is ElementKind.STRING:
        raise ValidationError(
            f"{name}: string labels are not accepted here; "
            f"encode them with pylearnkit.preprocessing.LabelEncoder"
        )
    if kind is ElementKind.OBJECT:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if kind not in NUMERIC_KINDS:
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected integer labels"
        )

    check_1d(arr, name)
    check_min_samples(arr, 1, name)

    if kind is ElementKind.FLOATING:
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.round(arr)):
            raise ValidationError(
                f"{name}: labels must be integral values, got non-integral floats"
            )

    if arr.min() < _INT32_MIN or arr.max() > _INT32_MAX:
        raise ValidationError(
            f"{name}: label values must fit in int32, got range "
            f"[{arr.min()}, {arr.max()}]"
        )

    if arr.dtype != np.int32:
        arr = arr.astype(np.int32)
    return arr


def check_convert_target_value_array(y: ArrayLike, name: str = 'y') -> NDArray[np.float64]:
    """
    Convert input to a Target Array.

    Args:
        y: Array-like of shape (n_samples,) or (n_samples, n_outputs)
        name: Parameter name for error messages

    Returns:
        float64 array with 1 or 2 dimensions

    Raises:
        ShapeError: If y is 0-D, 3-D or higher, or ragged
        ValidationError: If y is non-numeric, empty or holds NaN or Inf
    """
    y = check_array(y, name, dtype=np.float64)
    check_ndim(y, (1, 2), name)
    check_min_samples(y, 1, name)
    check_finite(y, name)
    if y.ndim == 2 and y.shape[1] < 1:
        raise ValidationError(
            f"{name}: requires at least 1 output column, got 0"
        )
    return y


def check_sample_size(
    x: NDArray[Any],
    y: NDArray[Any],
    names: tuple[str, str] = ('x', 'y'),
) -> None:
    """
    Verify a sample array and its labels/targets have the same n_samples.

    Raises:
        SizeMismatchError: If x.shape[0] != y.shape[0]
    """
    check_consistent_length(x, y, names=names)


def check_n_features(x: NDArray[Any], n_features: int, name: str = 'x') -> None:
    """
    Verify a Sample Matrix has the number of columns seen during fit.

    Raises:
        ShapeError: If x.shape[1] != n_features
    """
    if x.shape[1] != n_features:
        raise ShapeError(
            f"{name}: expected {n_features} features as seen in fit, got {x.shape[1]}",
            name=name,
            expected_ndim=(2,),
            actual_ndim=x.ndim,
            actual_shape=x.shape,
        )


# ═══════════════════════════════════════════════════════════════════════
# Hyperparameter checks
# ═══════════════════════════════════════════════════════════════════════


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def check_params_numeric(**params: Any) -> None:
    """Raise TypeError unless every value is a real number (bools excluded)."""
    for key, value in params.items():
        if _is_bool(value) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"{key}: expected a numeric value, got {type(value).__name__}"
            )


def check_params_numeric_or_none(**params: Any) -> None:
    """Like check_params_numeric, but None is accepted."""
    check_params_numeric(**{k: v for k, v in params.items() if v is not None})


def check_params_integer(**params: Any) -> None:
    """Raise TypeError unless every value is an integer (bools excluded)."""
    for key, value in params.items():
        if _is_bool(value) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"{key}: expected an integer value, got {type(value).__name__}"
            )


def check_params_integer_or_none(**params: Any) -> None:
    """Like check_params_integer, but None is accepted."""
    check_params_integer(**{k: v for k, v in params.items() if v is not None})


def check_params_boolean(**params: Any) -> None:
    """Raise TypeError unless every value is a bool."""
    for key, value in params.items():
        if not _is_bool(value):
            raise TypeError(
                f"{key}: expected a boolean value, got {type(value).__name__}"
            )


def check_params_string(**params: Any) -> None:
    """Raise TypeError unless every value is a str."""
    for key, value in params.items():
        if not isinstance(value, str):
            raise TypeError(
                f"{key}: expected a string value, got {type(value).__name__}"
            )


def check_params_nonnegative(**params: Any) -> None:
    """Raise RangeError for any negative value. None values are skipped."""
    for key, value in params.items():
        if value is not None and value < 0:
            raise RangeError(
                f"{key}: expected a non-negative value, got {value}",
                param=key, value=value, constraint='>= 0',
            )


def check_params_positive(**params: Any) -> None:
    """Raise RangeError for any value <= 0. None values are skipped."""
    for key, value in params.items():
        if value is not None and value <= 0:
            raise RangeError(
                f"{key}: expected a positive value, got {value}",
                param=key, value=value, constraint='> 0',
            )


def check_params_choice(name: str, value: Any, choices: tuple[Any, ...]) -> None:
    """
    Verify a hyperparameter is one of a fixed set of options.

    Raises:
        RangeError: If value is not in choices
    """
    if value not in choices:
        options = ", ".join(repr(c) for c in choices)
        raise RangeError(
            f"{name}: must be one of {options}, got {value!r}",
            param=name, value=value, constraint=f"one of {options}",
        )


def check_params_range(
    name: str,
    value: float,
    *,
    low: float | None = None,
    high: float | None = None,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> None:
    """
    Verify a hyperparameter lies inside an interval.

    Raises:
        RangeError: If value falls outside the interval
    """
    too_low = low is not None and (value < low if low_inclusive else value <= low)
    too_high = high is not None and (value > high if high_inclusive else value >= high)
    if too_low or too_high:
        left = '[' if low_inclusive else '('
        right = ']' if high_inclusive else ')'
        interval = f"{left}{'-inf' if low is None else low}, {'inf' if high is None else high}{right}"
        raise RangeError(
            f"{name}: expected a value in {interval}, got {value}",
            param=name, value=value, constraint=interval,
        )
