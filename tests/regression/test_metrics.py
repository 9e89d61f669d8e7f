"""
Tests for the metrics module.

Reference values for the F-test are checked against scipy and hand-computed
sums of squares; edge cases cover every NaN/inf convention.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from pycurves.core.exceptions import DimensionError, ValidationError
from pycurves.regression import SampleSet, compute_metrics, fit_linear
from pycurves.regression.metrics import r_squared


@pytest.fixture
def small_fit():
    """Hand-checkable residuals: y = [1, 2, 4, 5, 8], ŷ = [1.5, 2, 3.5, 5, 7]."""
    samples = SampleSet.from_arrays([0.0, 1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 4.0, 5.0, 8.0])
    predictions = np.array([1.5, 2.0, 3.5, 5.0, 7.0])
    return samples, predictions


class TestErrorMeans:

    def test_hand_computed(self, small_fit):
        samples, predictions = small_fit
        m = compute_metrics(samples, predictions, 2)
        # residuals: -0.5, 0, 0.5, 0, 1
        assert m.mae == pytest.approx(2.0 / 5)
        assert m.mse == pytest.approx(1.5 / 5)
        assert m.rmse == pytest.approx(math.sqrt(0.3))
        expected_mape = (0.5 / 1 + 0 + 0.5 / 4 + 0 + 1 / 8) / 5 * 100
        assert m.mape == pytest.approx(expected_mape)

    def test_mape_skips_zero_y(self):
        samples = SampleSet.from_arrays([0.0, 1.0, 2.0], [0.0, 2.0, 4.0])
        m = compute_metrics(samples, [1.0, 1.0, 4.0], 2)
        assert m.mape == pytest.approx((0.5 + 0.0) / 2 * 100)
        assert np.isfinite(m.mape)

    def test_mape_nan_when_all_y_zero(self):
        samples = SampleSet.from_arrays([0.0, 1.0, 2.0], [0.0, 0.0, 0.0])
        m = compute_metrics(samples, [0.1, 0.0, -0.1], 1)
        assert math.isnan(m.mape)


class TestRSquared:

    def test_formula(self, small_fit):
        samples, predictions = small_fit
        y = samples.y
        expected = 1 - 1.5 / float(np.sum((y - y.mean()) ** 2))
        assert compute_metrics(samples, predictions, 2).r_squared == pytest.approx(expected)

    def test_constant_y_exact(self):
        y = np.array([3.0, 3.0, 3.0])
        assert r_squared(y, y.copy()) == 1.0

    def test_constant_y_inexact(self):
        y = np.array([3.0, 3.0, 3.0])
        assert r_squared(y, np.array([3.0, 3.1, 2.9])) == 0.0

    def test_can_be_negative(self):
        y = np.array([1.0, 2.0, 3.0])
        assert r_squared(y, np.array([3.0, 2.0, 1.0])) < 0


class TestAdjustedRSquared:

    def test_formula(self, small_fit):
        samples, predictions = small_fit
        m = compute_metrics(samples, predictions, 2)
        assert m.adjusted_r_squared == pytest.approx(1 - (1 - m.r_squared) * 4 / 2)

    def test_undefined_when_n_minus_p_minus_1_not_positive(self):
        samples = SampleSet.from_arrays([0.0, 1.0, 2.0], [1.0, 2.0, 2.5])
        m = compute_metrics(samples, [1.1, 1.9, 2.6], 2)
        assert math.isnan(m.adjusted_r_squared)


class TestStandardErrorAndF:

    def test_standard_error(self, small_fit):
        samples, predictions = small_fit
        m = compute_metrics(samples, predictions, 2)
        assert m.standard_error == pytest.approx(math.sqrt(1.5 / 3))

    def test_f_statistic_and_p_value(self, small_fit):
        samples, predictions = small_fit
        y = samples.y
        ss_tot = float(np.sum((y - y.mean()) ** 2))
        m = compute_metrics(samples, predictions, 2)
        expected_f = ((ss_tot - 1.5) / 1) / (1.5 / 3)
        assert m.f_statistic == pytest.approx(expected_f)
        assert m.p_value == pytest.approx(sp_stats.f.sf(expected_f, 1, 3))
        assert 0.0 <= m.p_value <= 1.0

    def test_linear_p_value_matches_scipy_linregress(self, noisy_line):
        result = fit_linear(noisy_line)
        reference = sp_stats.linregress(noisy_line.x, noisy_line.y)
        assert result.metrics.p_value == pytest.approx(reference.pvalue, rel=1e-6, abs=1e-300)
        assert result.r_squared == pytest.approx(reference.rvalue ** 2)

    def test_undefined_for_single_parameter(self, small_fit):
        samples, predictions = small_fit
        m = compute_metrics(samples, predictions, 1)
        assert math.isnan(m.f_statistic)
        assert math.isnan(m.p_value)

    def test_undefined_when_no_residual_dof(self):
        samples = SampleSet.from_arrays([0.0, 1.0], [1.0, 3.0])
        m = compute_metrics(samples, [1.1, 2.9], 2)
        assert math.isnan(m.standard_error)
        assert math.isnan(m.f_statistic)
        assert math.isnan(m.p_value)

    def test_perfect_fit(self, exact_line):
        m = fit_linear(exact_line).metrics
        assert m.f_statistic == math.inf
        assert m.p_value == 0.0
        assert m.standard_error == pytest.approx(0.0, abs=1e-9)


class TestInformationCriteria:

    def test_gaussian_log_likelihood(self, small_fit):
        samples, predictions = small_fit
        m = compute_metrics(samples, predictions, 2)
        n, mse = 5, 0.3
        log_l = -0.5 * n * math.log(2 * math.pi * mse) - 0.5 * n
        assert m.aic == pytest.approx(2 * 2 - 2 * log_l)
        assert m.bic == pytest.approx(math.log(n) * 2 - 2 * log_l)

    def test_perfect_fit_is_minus_infinity(self, exact_line):
        m = fit_linear(exact_line).metrics
        assert m.aic == -math.inf
        assert m.bic == -math.inf

    def test_more_parameters_penalized(self, small_fit):
        samples, predictions = small_fit
        assert compute_metrics(samples, predictions, 3).aic > compute_metrics(samples, predictions, 2).aic


class TestMetricsInput:

    def test_length_mismatch(self, small_fit):
        samples, _ = small_fit
        with pytest.raises(DimensionError):
            compute_metrics(samples, [1.0, 2.0], 2)

    def test_empty(self):
        with pytest.raises(ValidationError):
            compute_metrics(SampleSet.from_pairs([]), [], 2)

    def test_as_dict(self, small_fit):
        samples, predictions = small_fit
        d = compute_metrics(samples, predictions, 2).as_dict()
        assert set(d) >= {'mae', 'mse', 'rmse', 'mape', 'r_squared', 'adjusted_r_squared',
                          'aic', 'bic', 'standard_error', 'f_statistic', 'p_value'}
