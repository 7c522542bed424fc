"""
Cross-validation solution type.

CrossValidationSolution wraps Result[CVParams] and adds summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylearnkit.core.result import Result
from pylearnkit.model_selection._common import CVParams

if TYPE_CHECKING:
    from pylearnkit.model_selection.design import CrossValidationDesign


@dataclass
class CrossValidationSolution:
    """
    User-facing cross-validation report.

    Per-fold arrays are index aligned with the splitter's output.
    """
    _result: Result[CVParams]
    _design: 'CrossValidationDesign | None'

    @property
    def test_score(self) -> NDArray[np.float64]:
        """Score on each test fold."""
        return self._result.params.test_score

    @property
    def train_score(self) -> NDArray[np.float64] | None:
        """Score on each training fold (None unless requested)."""
        return self._result.params.train_score

    @property
    def fit_time(self) -> NDArray[np.float64]:
        """Seconds spent fitting on each fold."""
        return self._result.params.fit_time

    @property
    def n_splits(self) -> int:
        return int(self.test_score.shape[0])

    @property
    def mean_test_score(self) -> float:
        return float(self.test_score.mean())

    @property
    def std_test_score(self) -> float:
        return float(self.test_score.std())

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def as_dict(self) -> dict[str, NDArray[np.float64] | None]:
        """Report as a dictionary keyed by test_score, train_score, fit_time."""
        return {
            'test_score': self.test_score,
            'train_score': self.train_score,
            'fit_time': self.fit_time,
        }

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format a per-fold table.

        Produces output like:
            Cross-validation: Ridge, 3 splits (KFold), scored by R2Score

             fold  test_score  train_score  fit_time
                0    0.912345     0.950000    0.0012
                1    0.901234     0.948000    0.0011
                2    0.923456     0.951000    0.0011

            test_score: mean = 0.912345, std = 0.008988
        """
        info = self._result.info
        has_train = self.train_score is not None
        lines = [
            f"Cross-validation: {info.get('estimator', '?')}, "
            f"{self.n_splits} splits ({info.get('splitter', '?')}), "
            f"scored by {info.get('evaluator', '?')}",
            "",
        ]

        header = f"{'fold':>5s}  {'test_score':>10s}"
        if has_train:
            header += f"  {'train_score':>11s}"
        header += f"  {'fit_time':>8s}"
        lines.append(header)

        for k in range(self.n_splits):
            row = f"{k:>5d}  {self.test_score[k]:>10.6f}"
            if has_train:
                row += f"  {self.train_score[k]:>11.6f}"
            row += f"  {self.fit_time[k]:>8.4f}"
            lines.append(row)

        lines.append("")
        lines.append(
            f"test_score: mean = {self.mean_test_score:.6f}, "
            f"std = {self.std_test_score:.6f}"
        )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CrossValidationSolution(n_splits={self.n_splits}, "
            f"mean_test_score={self.mean_test_score:.4g})"
        )
