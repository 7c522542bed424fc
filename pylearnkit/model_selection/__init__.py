"""
Model selection.

Public API:
    KFold(n_splits)            - consecutive folds
    StratifiedKFold(n_splits)  - folds preserving class proportions
    ShuffleSplit(n_splits)     - independent random splits
    cross_validate(est, x, y, splitter) - per-fold scores and fit times
"""

from pylearnkit.model_selection._common import CVParams
from pylearnkit.model_selection.cross_validation import cross_validate
from pylearnkit.model_selection.design import CrossValidationDesign
from pylearnkit.model_selection.k_fold import KFold
from pylearnkit.model_selection.shuffle_split import ShuffleSplit
from pylearnkit.model_selection.solution import CrossValidationSolution
from pylearnkit.model_selection.stratified_k_fold import StratifiedKFold

__all__ = [
    "cross_validate",
    "CrossValidationDesign",
    "CrossValidationSolution",
    "CVParams",
    "KFold",
    "ShuffleSplit",
    "StratifiedKFold",
]
