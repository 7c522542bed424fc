"""
Evaluation measures for pylearnkit.

Every evaluator is a stateless object with score(y_true, y_pred) -> float.

Usage:
    from pylearnkit.evaluation import Accuracy, FScore

    Accuracy().score(y_true, y_pred)
    FScore(average='macro').score(y_true, y_pred)
"""
from pylearnkit.evaluation.accuracy import Accuracy
from pylearnkit.evaluation.adjusted_rand_score import AdjustedRandScore
from pylearnkit.evaluation.explained_variance_score import ExplainedVarianceScore
from pylearnkit.evaluation.function import classification_report, confusion_matrix
from pylearnkit.evaluation.log_loss import LogLoss
from pylearnkit.evaluation.mutual_information import MutualInformation, NormalizedMutualInformation
from pylearnkit.evaluation.precision_recall import FScore, Precision, Recall
from pylearnkit.evaluation.purity import Purity, majority_classes
from pylearnkit.evaluation.r2_score import R2Score
from pylearnkit.evaluation.regression_error import (
    MeanAbsoluteError,
    MeanSquaredError,
    MedianAbsoluteError,
)

__all__ = [
    "Accuracy",
    "AdjustedRandScore",
    "ExplainedVarianceScore",
    "FScore",
    "LogLoss",
    "MeanAbsoluteError",
    "MeanSquaredError",
    "MedianAbsoluteError",
    "MutualInformation",
    "NormalizedMutualInformation",
    "Precision",
    "Purity",
    "R2Score",
    "Recall",
    "classification_report",
    "confusion_matrix",
    "majority_classes",
]
