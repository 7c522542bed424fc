"""
pylearnkit: a uniform estimator contract for machine learning in Python.

Every algorithm exposes the same fit / predict / transform / score
surface, receives inputs converted at the boundary to well-formed numpy
arrays, and draws randomness from an explicitly seeded generator.

Submodules:
    base: Estimator and the Classifier, Regressor, ClusterAnalyzer and
        Transformer capability mixins
    evaluation: Accuracy, R2Score, Purity, Precision, Recall, FScore, ...
    preprocessing: StandardScaler, LabelEncoder
    linear_model: Ridge
    naive_bayes: GaussianNB
    clustering: KMeans
    ensemble: BaggingClassifier, BaggingRegressor
    model_selection: KFold, StratifiedKFold, ShuffleSplit, cross_validate
"""

__version__ = "0.1.0"

from pylearnkit import base
from pylearnkit import evaluation
from pylearnkit.base import (
    Classifier,
    ClusterAnalyzer,
    Estimator,
    Regressor,
    Transformer,
)

__all__ = [
    "__version__",
    "base",
    "evaluation",
    "Classifier",
    "ClusterAnalyzer",
    "Estimator",
    "Regressor",
    "Transformer",
]
