"""
Shared compute infrastructure for pylearnkit.

IMPORTANT: This is NOT where estimators live. This module contains shared
NUMERIC infrastructure used by estimators and evaluators.

Submodules:
    timing: Execution timing utilities
    precision: Safe division and logarithm
    linalg: Linear algebra kernels with backend / fallback paths
"""

from pylearnkit.core.compute.timing import Timer, timed_call
from pylearnkit.core.compute.precision import safe_divide, safe_log

__all__ = [
    # Timing
    "Timer",
    "timed_call",
    # Precision
    "safe_divide",
    "safe_log",
]
