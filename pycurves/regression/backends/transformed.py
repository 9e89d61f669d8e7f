"""
Models fitted by linearization.

    exponential  y = a·e^(bx)   keep y > 0          fit (x, ln y)     a = e^intercept
    logarithmic  y = a + b·ln x keep x > 0          fit (ln x, y)     a = intercept
    power        y = a·x^b      keep x > 0, y > 0   fit (ln x, ln y)  a = e^intercept

In every case b is the slope of the line fitted in transformed space. The
transformed-space R² is never reported: predictions, R² and the metrics are
recomputed on the original scale over the filtered samples.
"""

from abc import abstractmethod
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import FitConfig
from pycurves.regression.backends.base import CurveBackend, Predictor, fmt_coef, fmt_term
from pycurves.regression.backends.linear import least_squares_line
from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind


class TransformedBackend(CurveBackend):
    """Linearize, fit a line, map the line's coefficients back."""

    transform: str

    @abstractmethod
    def forward(
        self, x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Map filtered samples into the space where the model is a line."""
        ...

    @abstractmethod
    def inverse(self, intercept: float, slope: float) -> tuple[float, float]:
        """Map line coefficients back to (a, b)."""
        ...

    def estimate(self, samples: SampleSet, config: FitConfig, timer: Timer):
        with timer.section('transform'):
            tx, ty = self.forward(samples.x, samples.y)

        with timer.section('solve'):
            intercept, slope = least_squares_line(tx, ty, config.degenerate_tol)
            a, b = self.inverse(intercept, slope)

        info = {
            'method': 'linearized_least_squares',
            'transform': self.transform,
            'linear_coefficients': (intercept, slope),
        }
        return (a, b), info, []


class ExponentialBackend(TransformedBackend):
    """y = a·e^(bx)."""

    kind = ModelKind.EXPONENTIAL
    transform = '(x, ln y)'

    def select(self, samples: SampleSet) -> NDArray[np.bool_]:
        return samples.y > 0

    def forward(self, x, y):
        return x, np.log(y)

    def inverse(self, intercept: float, slope: float) -> tuple[float, float]:
        # Overflow yields inf, which the base class rejects
        with np.errstate(over='ignore'):
            return float(np.exp(intercept)), slope

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        a, b = coefficients

        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            return a * np.exp(b * x)

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        a, b = coefficients
        return f"y = {fmt_coef(a, precision)}e^({fmt_coef(b, precision)}x)"


class LogarithmicBackend(TransformedBackend):
    """y = a + b·ln(x)."""

    kind = ModelKind.LOGARITHMIC
    transform = '(ln x, y)'

    def select(self, samples: SampleSet) -> NDArray[np.bool_]:
        return samples.x > 0

    def forward(self, x, y):
        return np.log(x), y

    def inverse(self, intercept: float, slope: float) -> tuple[float, float]:
        return intercept, slope

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        a, b = coefficients

        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            # ln is undefined for x <= 0; those points predict NaN
            with np.errstate(divide='ignore', invalid='ignore'):
                return a + b * np.log(x)

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        a, b = coefficients
        return f"y = {fmt_coef(a, precision)} {fmt_term(b, precision, ' ln(x)')}"


class PowerBackend(TransformedBackend):
    """y = a·x^b."""

    kind = ModelKind.POWER
    transform = '(ln x, ln y)'

    def select(self, samples: SampleSet) -> NDArray[np.bool_]:
        return (samples.x > 0) & (samples.y > 0)

    def forward(self, x, y):
        return np.log(x), np.log(y)

    def inverse(self, intercept: float, slope: float) -> tuple[float, float]:
        # Overflow yields inf, which the base class rejects
        with np.errstate(over='ignore'):
            return float(np.exp(intercept)), slope

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        a, b = coefficients

        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            # Non-integer powers of negative x are undefined and predict NaN
            with np.errstate(divide='ignore', invalid='ignore'):
                return a * np.power(x, b)

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        a, b = coefficients
        return f"y = {fmt_coef(a, precision)}x^{fmt_coef(b, precision)}"
