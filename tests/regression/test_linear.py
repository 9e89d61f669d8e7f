"""
Tests for the linear core.
"""

import numpy as np
import pytest

from pycurves.core.exceptions import NumericalError
from pycurves.regression import FitResult, ModelKind, fit_linear
from pycurves.regression.backends.linear import least_squares_line


class TestLinearExact:
    """y = 2 + 3x is recovered exactly."""

    def test_coefficients(self, exact_line):
        result = fit_linear(exact_line)
        assert isinstance(result, FitResult)
        intercept, slope = result.coefficients
        assert intercept == pytest.approx(2.0, abs=1e-9)
        assert slope == pytest.approx(3.0, abs=1e-9)

    def test_r_squared_one(self, exact_line):
        result = fit_linear(exact_line)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)

    def test_predicted_points(self, exact_line):
        result = fit_linear(exact_line)
        np.testing.assert_allclose(result.predicted_points, [2.0, 5.0, 8.0, 11.0], atol=1e-9)

    def test_kind_and_params(self, exact_line):
        result = fit_linear(exact_line)
        assert result.kind is ModelKind.LINEAR
        assert result.n_params == 2
        assert result.n_observations == 4
        assert result.info['method'] == 'closed_form'

    def test_display_equation(self, exact_line):
        assert fit_linear(exact_line).display_equation == "y = 3.00x + 2.00"


class TestLinearLeastSquares:
    """Hand-computed least squares answer."""

    def test_hand_computed(self):
        # Σx=6, Σy=4, Σxy=10, Σx²=14, n=4
        # slope = (40 - 24) / (56 - 36) = 0.8, intercept = (4 - 4.8) / 4 = -0.2
        pairs = [(0.0, 0.0), (1.0, 0.0), (2.0, 2.0), (3.0, 2.0)]
        result = fit_linear(pairs)
        np.testing.assert_allclose(result.coefficients, [-0.2, 0.8], atol=1e-12)
        assert result.display_equation == "y = 0.80x - 0.20"

    def test_matches_numpy_polyfit(self, noisy_line):
        result = fit_linear(noisy_line)
        slope, intercept = np.polyfit(noisy_line.x, noisy_line.y, 1)
        np.testing.assert_allclose(result.coefficients, [intercept, slope], rtol=1e-10)

    def test_residual_minimal(self, noisy_line):
        """Perturbing the coefficients never lowers the residual sum of squares."""
        result = fit_linear(noisy_line)
        a, b = result.coefficients
        best = float(np.sum(result.residuals ** 2))
        for da, db in [(1e-3, 0), (-1e-3, 0), (0, 1e-3), (0, -1e-3), (1e-3, -1e-3)]:
            y_hat = (a + da) + (b + db) * noisy_line.x
            assert float(np.sum((noisy_line.y - y_hat) ** 2)) > best

    def test_residuals_sum_to_zero(self, noisy_line):
        result = fit_linear(noisy_line)
        assert abs(result.residuals.sum()) < 1e-10


class TestLinearDegenerate:
    """Degenerate inputs give no result, never NaN coefficients."""

    def test_too_few_samples(self):
        assert fit_linear([(1.0, 2.0)]) is None

    def test_empty(self):
        assert fit_linear([]) is None

    def test_identical_x(self):
        assert fit_linear([(2.0, 1.0), (2.0, 3.0), (2.0, 5.0)]) is None

    def test_all_zero_x(self):
        assert fit_linear([(0.0, 1.0), (0.0, 3.0)]) is None

    def test_core_raises_on_no_spread(self):
        x = np.array([5.0, 5.0, 5.0])
        with pytest.raises(NumericalError, match="no spread"):
            least_squares_line(x, np.array([1.0, 2.0, 3.0]), 1e-12)

    def test_constant_y(self):
        """SS_tot = 0 with an exact fit reports R² = 1."""
        result = fit_linear([(0.0, 4.0), (1.0, 4.0), (2.0, 4.0)])
        np.testing.assert_allclose(result.coefficients, [4.0, 0.0], atol=1e-12)
        assert result.r_squared == 1.0


class TestLinearImmutability:

    def test_arrays_read_only(self, exact_line):
        result = fit_linear(exact_line)
        with pytest.raises(ValueError):
            result.predicted_points[0] = 0.0
        with pytest.raises(ValueError):
            result.residuals[0] = 0.0

    def test_independent_results(self, exact_line):
        first = fit_linear(exact_line)
        second = fit_linear(exact_line)
        assert first is not second
        assert first.predicted_points is not second.predicted_points
        assert first.coefficients == second.coefficients


class TestLinearLargeOffset:
    """Distinct x with a large common offset, e.g. yyyymmdd dates."""

    def test_date_encoded_x(self):
        x = 20240101.0 + np.arange(5.0)
        y = 2.0 + 3.0 * np.arange(5.0)
        result = fit_linear(list(zip(x, y)))
        assert result is not None
        intercept, slope = result.coefficients
        assert slope == pytest.approx(3.0, rel=1e-12)
        assert intercept == pytest.approx(2.0 - 3.0 * 20240101.0, rel=1e-12)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)

    def test_matches_shifted_fit(self, rng):
        t = np.linspace(0.0, 4.0, 20)
        y = 1.0 + 0.5 * t + rng.standard_normal(20) * 0.1
        shifted = fit_linear(list(zip(t + 1e9, y)))
        base = fit_linear(list(zip(t, y)))
        assert shifted.coefficients[1] == pytest.approx(base.coefficients[1], rel=1e-5)
        np.testing.assert_allclose(shifted.predicted_points, base.predicted_points, rtol=1e-5)

    def test_near_constant_x_still_degenerate(self):
        x = np.full(3, 0.1)
        with pytest.raises(NumericalError, match="no spread"):
            least_squares_line(x, np.array([1.0, 2.0, 3.0]), 1e-12)
