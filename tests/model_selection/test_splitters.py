"""
Tests for the cross-validation splitters.

Every splitter must return (train, test) index pairs that are sorted,
disjoint and reproducible for a given instance.
"""

import numpy as np
import pytest

from pylearnkit.core.exceptions import RangeError, ValidationError
from pylearnkit.model_selection import KFold, ShuffleSplit, StratifiedKFold


def _assert_disjoint_sorted(splits, n_samples):
    for train, test in splits:
        assert np.intersect1d(train, test).size == 0
        np.testing.assert_array_equal(train, np.sort(train))
        np.testing.assert_array_equal(test, np.sort(test))
        assert train.max(initial=-1) < n_samples
        assert test.max() < n_samples


def _assert_same_splits(a, b):
    assert len(a) == len(b)
    for (train_a, test_a), (train_b, test_b) in zip(a, b):
        np.testing.assert_array_equal(train_a, train_b)
        np.testing.assert_array_equal(test_a, test_b)


# ═══════════════════════════════════════════════════════════════════════
# KFold
# ═══════════════════════════════════════════════════════════════════════


class TestKFold:

    def test_three_samples_two_folds(self):
        splits = KFold(n_splits=2).split([[0.0], [1.0], [2.0]])
        _assert_same_splits(splits, [
            (np.array([2]), np.array([0, 1])),
            (np.array([0, 1]), np.array([2])),
        ])

    def test_every_sample_tested_once(self):
        x = np.zeros((10, 2))
        splits = KFold(n_splits=3).split(x)
        assert [test.size for _, test in splits] == [4, 3, 3]
        tested = np.concatenate([test for _, test in splits])
        np.testing.assert_array_equal(np.sort(tested), np.arange(10))
        for train, test in splits:
            assert train.size + test.size == 10
        _assert_disjoint_sorted(splits, 10)

    def test_consecutive_without_shuffle(self):
        splits = KFold(n_splits=2).split(np.zeros((4, 1)))
        np.testing.assert_array_equal(splits[0][1], [0, 1])
        np.testing.assert_array_equal(splits[1][1], [2, 3])

    def test_shuffle_reproducible(self):
        x = np.zeros((30, 1))
        splitter = KFold(n_splits=5, shuffle=True, random_seed=11)
        _assert_same_splits(splitter.split(x), splitter.split(x))
        _assert_same_splits(
            splitter.split(x),
            KFold(n_splits=5, shuffle=True, random_seed=11).split(x),
        )

    def test_shuffle_permutes(self):
        x = np.zeros((30, 1))
        shuffled = KFold(n_splits=3, shuffle=True, random_seed=11).split(x)
        ordered = KFold(n_splits=3).split(x)
        assert any(
            not np.array_equal(s[1], o[1]) for s, o in zip(shuffled, ordered)
        )

    def test_too_many_splits(self):
        with pytest.raises(ValidationError, match="n_splits=5"):
            KFold(n_splits=5).split(np.zeros((3, 1)))

    def test_invalid_n_splits(self):
        with pytest.raises(RangeError):
            KFold(n_splits=1)
        with pytest.raises(TypeError):
            KFold(n_splits=2.0)

    def test_params(self):
        splitter = KFold(n_splits=4, random_seed=3)
        assert splitter.n_splits == 4
        assert splitter.params['random_seed'] == 3
        assert repr(splitter) == "KFold(n_splits=4, shuffle=False, random_seed=3)"


# ═══════════════════════════════════════════════════════════════════════
# StratifiedKFold
# ═══════════════════════════════════════════════════════════════════════


class TestStratifiedKFold:

    def test_preserves_proportions(self):
        y = np.array([0] * 6 + [1] * 3)
        x = np.zeros((9, 1))
        splits = StratifiedKFold(n_splits=3).split(x, y)
        for _, test in splits:
            assert np.count_nonzero(y[test] == 0) == 2
            assert np.count_nonzero(y[test] == 1) == 1
        tested = np.concatenate([test for _, test in splits])
        np.testing.assert_array_equal(np.sort(tested), np.arange(9))
        _assert_disjoint_sorted(splits, 9)

    def test_shuffle_reproducible(self):
        y = np.repeat([0, 1, 2], 10)
        x = np.zeros((30, 1))
        splitter = StratifiedKFold(n_splits=5, shuffle=True, random_seed=2)
        _assert_same_splits(splitter.split(x, y), splitter.split(x, y))

    def test_requires_labels(self):
        with pytest.raises(ValidationError, match="requires labels"):
            StratifiedKFold().split(np.zeros((6, 1)))

    def test_small_class(self):
        y = [0, 0, 0, 1, 1]
        with pytest.raises(ValidationError, match="class 1 has 2"):
            StratifiedKFold(n_splits=3).split(np.zeros((5, 1)), y)


# ═══════════════════════════════════════════════════════════════════════
# ShuffleSplit
# ═══════════════════════════════════════════════════════════════════════


class TestShuffleSplit:

    def test_sizes(self):
        x = np.zeros((20, 1))
        splits = ShuffleSplit(n_splits=4, test_size=0.25, random_seed=0).split(x)
        assert len(splits) == 4
        for train, test in splits:
            assert test.size == 5
            assert train.size == 15
        _assert_disjoint_sorted(splits, 20)

    def test_train_size(self):
        x = np.zeros((20, 1))
        splits = ShuffleSplit(n_splits=2, test_size=0.2, train_size=0.5, random_seed=0).split(x)
        for train, test in splits:
            assert test.size == 4
            assert train.size == 10
        _assert_disjoint_sorted(splits, 20)

    def test_reproducible(self):
        x = np.zeros((20, 1))
        splitter = ShuffleSplit(n_splits=3, test_size=0.3, random_seed=5)
        _assert_same_splits(splitter.split(x), splitter.split(x))

    def test_empty_test_side(self):
        with pytest.raises(ValidationError, match="no test samples"):
            ShuffleSplit(test_size=0.01).split(np.zeros((20, 1)))

    def test_sides_overflow(self):
        with pytest.raises(ValidationError, match="exceed"):
            ShuffleSplit(test_size=0.6, train_size=0.6).split(np.zeros((10, 1)))

    def test_invalid_fractions(self):
        with pytest.raises(RangeError):
            ShuffleSplit(test_size=1.0)
        with pytest.raises(RangeError):
            ShuffleSplit(test_size=0.2, train_size=0.0)
