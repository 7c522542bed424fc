"""
Linear models.

Public API:
    Ridge - L2-regularized least squares, closed-form solve
"""

from pylearnkit.linear_model.ridge import Ridge

__all__ = [
    "Ridge",
]
