"""
Linear system solvers.

Provides one interface over two paths:
    - SciPy (LAPACK Cholesky driver), used when the linalg capability is on
    - NumPy (LAPACK LU driver), always available

Both return the solution of a symmetric positive definite system to
floating point accuracy, so callers may switch paths freely.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylearnkit.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class SolveResult:
    """
    Result of a linear solve.

    Attributes:
        solution: Solution array, same trailing shape as the right-hand side
        backend: Which path produced it ('scipy' or 'numpy')
    """
    solution: NDArray[np.floating[Any]]
    backend: str


def solve_symmetric_scipy(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> SolveResult:
    """
    Solve a x = b for symmetric positive definite a using SciPy.

    Raises:
        SingularMatrixError: If a is singular or not positive definite
    """
    import scipy.linalg as sla

    try:
        x = sla.solve(a, b, assume_a='pos')
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"System matrix is singular or not positive definite: {e}",
            matrix_name='a',
            backend='scipy',
        ) from e
    return SolveResult(solution=x, backend='scipy')


def solve_symmetric_numpy(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> SolveResult:
    """
    Solve a x = b with numpy.linalg.solve.

    Raises:
        SingularMatrixError: If a is singular
    """
    try:
        x = np.linalg.solve(a, b)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"System matrix is singular: {e}",
            matrix_name='a',
            backend='numpy',
        ) from e
    return SolveResult(solution=x, backend='numpy')


def solve_symmetric(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    use_backend: bool,
) -> SolveResult:
    """
    Solve a symmetric positive definite system.

    Args:
        a: Square system matrix (p x p)
        b: Right-hand side, shape (p,) or (p, k)
        use_backend: Take the SciPy path (caller has checked the linalg
            capability); otherwise the NumPy path

    Returns:
        SolveResult
    """
    if use_backend:
        return solve_symmetric_scipy(a, b)
    return solve_symmetric_numpy(a, b)
