"""
Ensemble methods.

Public API:
    BaggingClassifier - bootstrap ensemble with majority voting
    BaggingRegressor  - bootstrap ensemble with mean prediction
"""

from pylearnkit.ensemble.bagging import BaggingClassifier, BaggingRegressor

__all__ = [
    "BaggingClassifier",
    "BaggingRegressor",
]
