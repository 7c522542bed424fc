"""
Encoding of arbitrary class labels as a Label Vector.

LabelEncoder is the one place where non-numeric labels (strings, for
instance) enter the toolkit. Everything downstream of it sees int32
class indices.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylearnkit.base import Estimator, Transformer
from pylearnkit.core.exceptions import ValidationError
from pylearnkit.core.validation import (
    as_ndarray,
    check_1d,
    check_convert_label_array,
    check_min_samples,
)


def _check_label_values(y: ArrayLike, name: str) -> NDArray[Any]:
    arr = as_ndarray(y, name)
    check_1d(arr, name)
    check_min_samples(arr, 1, name)
    return arr


class LabelEncoder(Transformer, Estimator):
    """
    Map labels to indices into the sorted set of distinct labels.

    Attributes (after fit):
        classes_: Sorted distinct labels seen in fit

    Example:
        >>> encoder = LabelEncoder()
        >>> encoder.fit_transform(['cat', 'dog', 'cat', 'bird'])
        array([1, 2, 1, 0], dtype=int32)
        >>> encoder.inverse_transform([0, 2])
        array(['bird', 'dog'], dtype='<U4')
    """

    def __init__(self, *, random_seed: int | None = None):
        super().__init__(random_seed=random_seed)

    def fit(self, x: ArrayLike, y: ArrayLike | None = None) -> LabelEncoder:
        """
        Learn the distinct labels.

        Args:
            x: Labels of any sortable element type, shape (n_samples,)

        Raises:
            ValidationError: If the labels cannot be ordered
        """
        arr = _check_label_values(x, 'x')
        try:
            classes = np.unique(arr)
        except TypeError as e:
            raise ValidationError(
                f"x: labels must be mutually comparable to be encoded: {e}"
            ) from e
        self._set_fitted(classes_=classes)
        return self

    def transform(self, x: ArrayLike) -> NDArray[np.int32]:
        """
        Encode labels as class indices.

        Raises:
            ValidationError: If x holds a label not seen in fit
        """
        self.check_is_fitted('transform')
        arr = _check_label_values(x, 'x')
        unknown = ~np.isin(arr, self.classes_)
        if np.any(unknown):
            examples = ", ".join(repr(v) for v in np.unique(arr[unknown])[:5].tolist())
            raise ValidationError(f"x: contains labels not seen in fit: {examples}")
        return np.searchsorted(self.classes_, arr).astype(np.int32)

    def inverse_transform(self, x: ArrayLike) -> NDArray[Any]:
        """
        Decode class indices back to the original labels.

        Raises:
            ValidationError: If an index is outside [0, n_classes)
        """
        self.check_is_fitted('inverse_transform')
        idx = check_convert_label_array(x, 'x')
        n_classes = self.classes_.shape[0]
        if idx.min() < 0 or idx.max() >= n_classes:
            raise ValidationError(
                f"x: class indices must lie in [0, {n_classes}), "
                f"got range [{idx.min()}, {idx.max()}]"
            )
        return self.classes_[idx]
