"""
Linear algebra kernels for pylearnkit.

All functions follow these conventions:
    - The backend path uses SciPy, the fallback path uses NumPy only
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    solve: Symmetric positive definite solvers
"""

from pylearnkit.core.compute.linalg.solve import (
    SolveResult,
    solve_symmetric,
    solve_symmetric_numpy,
    solve_symmetric_scipy,
)

__all__ = [
    "SolveResult",
    "solve_symmetric",
    "solve_symmetric_numpy",
    "solve_symmetric_scipy",
]
