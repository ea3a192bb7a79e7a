"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion to float64, object/string rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_positive_int / check_probability: scalar parameters
    - check_paired_sample: the composed check used by correlation()
"""

import numpy as np
import pytest

from corrboot.core.exceptions import (
    DimensionError,
    InvalidInputError,
    ValidationError,
)
from corrboot.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_paired_sample,
    check_positive_int,
    check_probability,
)


class TestCheckArray:

    def test_list_to_float64(self):
        result = check_array([1, 2, 3], "age")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "age")
        assert result.dtype == np.float64

    def test_float64_not_copied(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "age") is arr

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="age"):
            check_array(["a", "b"], "age")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "b", None], "age")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(InvalidInputError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(InvalidInputError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "x")


class TestShapeChecks:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_consistent_length(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.zeros(4), names=("x", "y"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))

    def test_min_samples(self):
        with pytest.raises(InvalidInputError, match="at least 2 samples, got 1"):
            check_min_samples(np.zeros(1), 2, "x")


class TestScalarChecks:

    @pytest.mark.parametrize("value", [1, 1000, np.int64(5)])
    def test_positive_int_ok(self, value):
        assert check_positive_int(value, "n_sim") == int(value)
        assert type(check_positive_int(value, "n_sim")) is int

    @pytest.mark.parametrize("value", [0, -3])
    def test_positive_int_too_small(self, value):
        with pytest.raises(InvalidInputError, match="n_sim must be >= 1"):
            check_positive_int(value, "n_sim")

    @pytest.mark.parametrize("value", [2.5, "10", True, None])
    def test_positive_int_wrong_type(self, value):
        with pytest.raises(InvalidInputError, match="integer"):
            check_positive_int(value, "n_sim")

    @pytest.mark.parametrize("value", [0.05, 0.5, 0.999])
    def test_probability_ok(self, value):
        assert check_probability(value, "alpha") == value

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_probability_out_of_range(self, value):
        with pytest.raises(InvalidInputError, match="alpha"):
            check_probability(value, "alpha")


class TestCheckPairedSample:

    def test_returns_float_arrays(self):
        x, y = check_paired_sample([1, 2, 3], [3, 2, 1])
        assert x.dtype == np.float64 and y.dtype == np.float64

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            check_paired_sample([1, 2, 3], [1, 2])

    def test_too_few(self):
        with pytest.raises(InvalidInputError, match="at least 2"):
            check_paired_sample([1.0], [2.0])

    def test_custom_names_in_message(self):
        with pytest.raises(InvalidInputError, match="progressivism"):
            check_paired_sample([1.0, 2.0], [1.0, np.nan], names=("age", "progressivism"))
