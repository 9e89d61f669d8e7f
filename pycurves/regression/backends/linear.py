"""
Closed-form ordinary least squares for y = a + bx.

This is the linear core: the transform-based backends (exponential,
logarithmic, power) linearize their data and call least_squares_line().
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import FitConfig
from pycurves.core.exceptions import NumericalError
from pycurves.regression.backends.base import CurveBackend, Predictor, fmt_coef, fmt_term
from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind


def least_squares_line(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    degenerate_tol: float,
) -> tuple[float, float]:
    """
    Intercept and slope of the least squares line through (x, y).

        slope     = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
        intercept = (Σy − slope·Σx) / n

    Evaluated on centered sums: slope = Σdx·dy / Σdx² with dx = x − x̄ and
    dy = y − ȳ. A large common offset in x (dates, timestamps) is harmless.

    Args:
        x: Predictor values (n,), n >= 2
        y: Response values (n,)
        degenerate_tol: x has no spread when its RMS deviation from the mean
            is at most degenerate_tol · max|x|

    Returns:
        (intercept, slope)

    Raises:
        NumericalError: If x has (numerically) no spread, or the result is
            not finite
    """
    n = x.shape[0]
    x_bar = float(np.mean(x))
    y_bar = float(np.mean(y))
    dx = x - x_bar
    dy = y - y_bar
    sdx2 = float(dx @ dx)

    scale = float(np.max(np.abs(x)))
    if not np.isfinite(sdx2) or np.sqrt(sdx2 / n) <= degenerate_tol * scale:
        raise NumericalError(
            f"x values have no spread (Σ(x − x̄)² = {sdx2:.3e}); slope is undefined"
        )

    slope = float(dx @ dy) / sdx2
    intercept = y_bar - slope * x_bar
    if not (np.isfinite(slope) and np.isfinite(intercept)):
        raise NumericalError(f"non-finite line coefficients ({intercept}, {slope})")
    return intercept, slope


class LinearBackend(CurveBackend):
    """y = intercept + slope · x, by the closed-form normal equations."""

    kind = ModelKind.LINEAR

    def estimate(self, samples: SampleSet, config: FitConfig, timer: Timer):
        with timer.section('solve'):
            intercept, slope = least_squares_line(samples.x, samples.y, config.degenerate_tol)
        return (intercept, slope), {'method': 'closed_form'}, []

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        intercept, slope = coefficients

        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            return intercept + slope * x

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        intercept, slope = coefficients
        return f"y = {fmt_coef(slope, precision)}x {fmt_term(intercept, precision)}"
