"""
Logistic curve y = σ(b0 + b1·x) by batch gradient descent.

Only samples with y in [0, 1] are used: the response must already be a
probability or proportion.

Algorithm:
    Initialize: b0 = b1 = 0
    For iteration 1..max_iter:
        p   = σ(b0 + b1·x)
        g0  = mean(p − y)
        g1  = mean((p − y)·x)
        b0 ← b0 − η·g0
        b1 ← b1 − η·g1
        Stop when |Δb0| < tol and |Δb1| < tol

The gradient is that of the mean log-loss. Hitting max_iter is not an error:
the last parameters are returned with converged=False and a warning, unless
FitConfig.strict_convergence asks for a ConvergenceError instead. Given the
same inputs and FitConfig the result is bit-for-bit reproducible.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import FitConfig
from pycurves.core.exceptions import ConvergenceError
from pycurves.regression.backends.base import CurveBackend, Predictor, fmt_coef, fmt_term
from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind


def sigmoid(z: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """σ(z) = 1 / (1 + e^(−z))."""
    # Clip to prevent overflow in exp
    z = np.clip(z, -500, 500)
    return 1.0 / (1.0 + np.exp(-z))


class LogisticBackend(CurveBackend):
    """y = 1 / (1 + e^−(b0 + b1·x))."""

    kind = ModelKind.LOGISTIC

    def select(self, samples: SampleSet) -> NDArray[np.bool_]:
        return (samples.y >= 0) & (samples.y <= 1)

    def estimate(self, samples: SampleSet, config: FitConfig, timer: Timer):
        x, y = samples.x, samples.y
        eta = config.learning_rate
        b0 = b1 = 0.0
        converged = False
        change = float('inf')

        with timer.section('gradient_descent'):
            for iteration in range(1, config.max_iter + 1):
                err = sigmoid(b0 + b1 * x) - y
                new_b0 = b0 - eta * float(np.mean(err))
                new_b1 = b1 - eta * float(np.mean(err * x))
                d0 = abs(new_b0 - b0)
                d1 = abs(new_b1 - b1)
                b0, b1 = new_b0, new_b1
                change = max(d0, d1)
                if d0 < config.tol and d1 < config.tol:
                    converged = True
                    break

        warnings_list: list[str] = []
        if not converged:
            message = (
                f"gradient descent did not converge in {config.max_iter} iterations "
                f"(last parameter change={change:.3e}, tol={config.tol:.1e})"
            )
            if config.strict_convergence:
                raise ConvergenceError(
                    message,
                    iterations=config.max_iter,
                    final_change=change,
                    threshold=config.tol,
                )
            warnings_list.append(message)

        info = {
            'method': 'gradient_descent',
            'converged': converged,
            'iterations': iteration,
            'learning_rate': eta,
        }
        return (b0, b1), info, warnings_list

    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        b0, b1 = coefficients

        def predict(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
            return sigmoid(b0 + b1 * x)

        return predict

    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        b0, b1 = coefficients
        return f"y = 1 / (1 + e^-({fmt_coef(b0, precision)} {fmt_term(b1, precision, 'x')}))"
