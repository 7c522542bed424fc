"""
Numerical precision helpers shared by evaluators and estimators.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def safe_divide(
    numerator: NDArray[np.floating[Any]],
    denominator: NDArray[np.floating[Any]],
    fill_value: float = 0.0
) -> NDArray[np.floating[Any]]:
    """
    Elementwise division with a fixed value where the denominator is zero.

    Args:
        numerator: Numerator array
        denominator: Denominator array
        fill_value: Value to use where denominator == 0

    Returns:
        numerator / denominator with fill_value at zero denominators
    """
    numerator = np.asarray(numerator, dtype=np.float64)
    denominator = np.asarray(denominator, dtype=np.float64)
    zero = denominator == 0
    with np.errstate(divide='ignore', invalid='ignore'):
        result = numerator / np.where(zero, 1.0, denominator)
    return np.where(zero, fill_value, result)


def safe_log(
    x: NDArray[np.floating[Any]],
    floor: float = 1e-300
) -> NDArray[np.floating[Any]]:
    """
    Natural logarithm with protection against log(0).

    Returns:
        log(max(x, floor))
    """
    return np.log(np.maximum(x, floor))
