"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_1d / check_2d / check_square: shape checks
    - check_consistent_length: multi-array length matching
    - check_positive_int / check_positive: scalar settings
"""

import numpy as np
import pytest

from pycurves.core.exceptions import DimensionError, ValidationError
from pycurves.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_positive,
    check_positive_int,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j], "x")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([(1.0, 2.0), (3.0,)], "samples")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf]), "y")


class TestShapeChecks:

    def test_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "y")

    def test_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_square_passes(self):
        check_square(np.eye(3), "A")

    def test_square_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((2, 3)), "A")


class TestCheckConsistentLength:

    def test_equal_lengths(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.ones(4), names=("x", "y"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))


class TestScalarChecks:

    def test_positive_int(self):
        assert check_positive_int(3, "degree") == 3
        assert check_positive_int(np.int64(2), "degree") == 2

    @pytest.mark.parametrize("bad", [0, -1, 2.0, True, "2", None])
    def test_positive_int_rejects(self, bad):
        with pytest.raises(ValidationError, match="degree"):
            check_positive_int(bad, "degree")

    def test_positive(self):
        assert check_positive(0.01, "learning_rate") == 0.01

    @pytest.mark.parametrize("bad", [0.0, -1e-3, float("nan"), float("inf"), "0.1"])
    def test_positive_rejects(self, bad):
        with pytest.raises(ValidationError, match="tol"):
            check_positive(bad, "tol")
