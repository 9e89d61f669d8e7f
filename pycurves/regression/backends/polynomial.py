"""
Polynomial least squares via the normal equations.

Builds the Vandermonde design X with rows [1, x, x², ..., x^d], forms
X'X β = X'y and solves it with Gaussian elimination. A pivot below
FitConfig.pivot_tol means the system is singular (too few distinct x values
for the degree) and the fit fails, as does an x whose powers overflow float64.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycurves.core.compute.linalg.gauss import gauss_solve
from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import FitConfig
from pycurves.core.exceptions import NumericalError
from pycurves.core.validation import check_positive_int
from pycurves.regression.backends.base import CurveBackend, Predictor, fmt_coef, fmt_term
from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind


def vandermonde(x: NDArray[np.floating[Any]], degree: int) -> NDArray[np.floating[Any]]:
    """Design matrix with columns x⁰, x¹, ..., x^degree."""
    return np.vander(x, degree + 1, increasing=True)


def horner(coefficients: tuple[float, ...], x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Evaluate c0 + c1·x + ... + cd·x^d."""
    result = np.full_like(x, coefficients[-1], dtype=np.float64)
    for c in reversed(coefficients[:-1]):
        result = result * x + c
    return result


class PolynomialBackend(CurveBackend):
    """y = c0 + c1·x + ... + cd·x^d."""

    kind = ModelKind.POLYNOMIAL

    def __init__(self, degree: int = 2):
        self.degree = check_positive_int(degree, 'degree')
        self.min_samples = self.degree + 1

    @property
    def n_params(self) -> int:
        return self.degree + 1

    def estimate(self, samples: SampleSet, config: FitConfig, timer: Timer):
        with timer.section('normal_equations'):
            with np.errstate(over='ignore', invalid='ignore'):
                X = vandermonde(samples.x, self.degree)
                XtX = X.T @ X
                Xty = X.T @ samples.y
            if not (np.all(np.isfinite(XtX)) and np.all(np.isfinite(Xty))):
                raise NumericalError(
                    f"{self.name}: normal equations overflow for degree {self.degree} "
                    f"(max |x| = {np.max(np.abs(samples.x)):.3e})"
                )

        with timer.section('solve'):
            gauss = gauss_solve(XtX, Xty, pivot_tol=config.pivot_tol)

        info = {
            'method': 'normal_equations',
            'degree': self.degree,
            'n_swaps': gauss.n_swaps,
        }
        return tuple(gauss.solution), info, []

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            return horner(coefficients, x)

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        degree = len(coefficients) - 1
        terms = []
        for power in range(degree, -1, -1):
            suffix = '' if power == 0 else ('x' if power == 1 else f"x^{power}")
            c = coefficients[power]
            if not terms:
                terms.append(f"{fmt_coef(c, precision)}{suffix}")
            else:
                terms.append(fmt_term(c, precision, suffix))
        return "y = " + " ".join(terms)
