"""
Tests for the evaluation measures.

Validates the documented reference values:
    - Accuracy of a half-correct prediction is 0.5
    - Purity of the six-sample example is 4/6
    - Macro / micro / binary F1 on the ten-sample example
    - R2 of a zero-variance column is 0.0
and that every evaluator validates its inputs like an estimator boundary.
"""

import numpy as np
import pytest

from pylearnkit.core.exceptions import RangeError, ShapeError, SizeMismatchError, ValidationError
from pylearnkit.evaluation import (
    Accuracy,
    FScore,
    MeanAbsoluteError,
    MeanSquaredError,
    Precision,
    Purity,
    R2Score,
    Recall,
    confusion_matrix,
    majority_classes,
)
from pylearnkit.evaluation.precision_recall import (
    f_score_each_class,
    micro_average_precision,
    precision_each_class,
    recall_each_class,
)


Y_TRUE = [0, 1, 2, 0, 1, 2, 3, 3, 0, 0]
Y_PRED = [0, 2, 1, 2, 1, 0, 3, 3, 0, 0]


# ═══════════════════════════════════════════════════════════════════════
# Accuracy
# ═══════════════════════════════════════════════════════════════════════


class TestAccuracy:

    def test_half_correct(self):
        assert Accuracy().score([1, 0, 1, 0], [1, 1, 0, 0]) == 0.5

    def test_signed_labels(self):
        y_true = [1, 1, 1, 1, 1, -1, -1, -1, -1, -1]
        y_pred = [-1, -1, 1, 1, 1, -1, -1, 1, 1, 1]
        assert Accuracy().score(y_true, y_pred) == 0.5

    def test_returns_python_float(self):
        assert type(Accuracy().score([1, 2], [1, 2])) is float

    def test_integral_floats_accepted(self):
        assert Accuracy().score([1.0, 2.0], [1, 2]) == 1.0

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError, match="y_true=3.*y_pred=2"):
            Accuracy().score([0, 1, 1], [0, 1])

    def test_non_integral_labels(self):
        with pytest.raises(ValidationError):
            Accuracy().score([0.5, 1.0], [0, 1])


# ═══════════════════════════════════════════════════════════════════════
# Purity
# ═══════════════════════════════════════════════════════════════════════


class TestPurity:

    def test_reference_value(self):
        result = Purity().score([0, 0, 1, 2, 1, 2], [0, 0, 1, 1, 2, 2])
        assert result == pytest.approx(4.0 / 6.0)

    def test_perfect_clustering_any_ids(self):
        assert Purity().score([0, 0, 1, 1], [7, 7, 3, 3]) == 1.0

    def test_single_cluster(self):
        assert Purity().score([0, 0, 1, 1, 1], [0, 0, 0, 0, 0]) == pytest.approx(0.6)

    def test_majority_tie_goes_to_lowest_label(self):
        assert majority_classes([1, 2, 2, 1], [0, 0, 1, 1]) == {0: 1, 1: 1}


# ═══════════════════════════════════════════════════════════════════════
# Precision / Recall / FScore
# ═══════════════════════════════════════════════════════════════════════


class TestPrecisionRecall:

    def test_per_class(self):
        np.testing.assert_allclose(precision_each_class(Y_TRUE, Y_PRED), [0.75, 0.5, 0.0, 1.0])
        np.testing.assert_allclose(recall_each_class(Y_TRUE, Y_PRED), [0.75, 0.5, 0.0, 1.0])

    def test_f1_macro(self):
        assert FScore(average='macro').score(Y_TRUE, Y_PRED) == pytest.approx(0.5625)

    def test_f1_micro(self):
        assert FScore(average='micro').score(Y_TRUE, Y_PRED) == pytest.approx(0.6)

    def test_f1_binary_uses_largest_label(self):
        assert FScore().score(Y_TRUE, Y_PRED) == pytest.approx(1.0)
        assert FScore().score([0, 1, 1, 0], [0, 1, 0, 1]) == pytest.approx(0.5)

    def test_precision_and_recall_binary(self):
        y_true = [0, 0, 1, 1, 1]
        y_pred = [0, 1, 1, 1, 0]
        assert Precision().score(y_true, y_pred) == pytest.approx(2.0 / 3.0)
        assert Recall().score(y_true, y_pred) == pytest.approx(2.0 / 3.0)

    def test_macro_precision(self):
        assert Precision(average='macro').score(Y_TRUE, Y_PRED) == pytest.approx(0.5625)
        assert Recall(average='macro').score(Y_TRUE, Y_PRED) == pytest.approx(0.5625)

    def test_zero_denominators_are_zero(self):
        # class 1 is never predicted: precision 0, F 0, no NaN
        np.testing.assert_array_equal(precision_each_class([0, 1], [0, 0]), [0.5, 0.0])
        np.testing.assert_array_equal(f_score_each_class([0, 1], [0, 0]), [2.0 / 3.0, 0.0])

    def test_micro_ignores_unknown_predicted_labels(self):
        # label 9 never occurs in y_true and does not count as a prediction
        assert micro_average_precision([0, 1], [0, 9]) == 1.0

    def test_unknown_average_rejected(self):
        with pytest.raises(RangeError, match="average"):
            FScore(average='weighted')

    def test_non_string_average_rejected(self):
        with pytest.raises(TypeError, match="average"):
            Precision(average=1)

    def test_average_exposed(self):
        assert Recall(average='micro').average == 'micro'
        assert repr(Precision(average='macro')) == "Precision(average='macro')"


class TestConfusionMatrix:

    def test_counts(self):
        matrix = confusion_matrix([0, 0, 1, 1], [0, 1, 1, 1])
        np.testing.assert_array_equal(matrix, [[1, 1], [0, 2]])
        assert matrix.dtype == np.int32

    def test_diagonal_sum_is_correct_count(self):
        matrix = confusion_matrix(Y_TRUE, Y_PRED)
        assert int(np.trace(matrix)) == 6
        assert int(matrix.sum()) == 10


# ═══════════════════════════════════════════════════════════════════════
# Regression measures
# ═══════════════════════════════════════════════════════════════════════


class TestR2Score:

    def test_perfect(self):
        assert R2Score().score([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 1.0

    def test_mean_prediction_is_zero(self):
        assert R2Score().score([1.0, 2.0, 3.0], [2.0, 2.0, 2.0]) == pytest.approx(0.0)

    def test_constant_target_is_zero(self):
        assert R2Score().score([5.0, 5.0, 5.0], [4.0, 5.0, 6.0]) == 0.0

    def test_multi_output_mean(self):
        y_true = np.array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]])
        y_pred = np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
        assert R2Score().score(y_true, y_pred) == pytest.approx(0.5)

    def test_shape_mismatch(self):
        with pytest.raises(ShapeError):
            R2Score().score(np.ones((3, 2)), np.ones(3))


class TestRegressionErrors:

    def test_mse(self):
        assert MeanSquaredError().score([1.0, 2.0], [2.0, 4.0]) == pytest.approx(2.5)

    def test_mae(self):
        assert MeanAbsoluteError().score([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.5)
