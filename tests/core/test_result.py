"""
Tests for the Result[P] envelope and the Timer that fills its timing.

Validates:
    - Generic payloads, default warnings, has_warning()
    - Frozen immutability
    - Timer phases accumulate and are readable once the block ends
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylearnkit.core.compute.timing import Timer, timed_call
from pylearnkit.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="sequential",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# Construction and defaults
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"n_splits": 5},
            timing={"total_seconds": 0.01},
            backend_name="joblib",
        )
        assert result.params.value == 42.0
        assert result.info["n_splits"] == 5
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "joblib"

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning(self):
        result = _result(warnings=("2 of 5 test scores are not finite",))
        assert result.has_warning("not finite")
        assert not result.has_warning("converge")

    def test_total_seconds(self):
        assert _result().total_seconds is None
        assert _result(timing={"total_seconds": 0.5, "folds": 0.4}).total_seconds == 0.5


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        with Timer() as timer:
            with timer.section("fit"):
                pass
            with timer.section("fit"):
                pass
        result = timer.result()
        assert set(result) == {"total_seconds", "fit"}
        assert result["fit"] >= 0.0
        assert result["total_seconds"] >= result["fit"]

    def test_result_inside_block(self):
        with Timer() as timer:
            with pytest.raises(RuntimeError, match="has not finished"):
                timer.result()

    def test_never_started(self):
        with pytest.raises(RuntimeError):
            Timer().total_seconds

    def test_timed_call(self):
        value, seconds = timed_call(sum, [1, 2, 3])
        assert value == 6
        assert seconds >= 0.0
