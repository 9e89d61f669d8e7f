"""
Solver dispatch for curve fitting.

This module provides the public fit functions and backend selection.

Every fit function has the same contract: it returns a FitResult, or None
when the data cannot support the model (too few samples after filtering,
no spread in x, singular normal equations, non-finite estimates). Callers
can therefore try several model kinds and keep whichever succeed. Malformed
input (non-numeric or non-finite values, mismatched lengths, a degree < 1)
still raises ValidationError.
"""

from typing import Any

from pycurves.core.compute.tolerances import FitConfig, DEFAULT_CONFIG
from pycurves.core.exceptions import NumericalError
from pycurves.regression.backends import (
    CurveBackend,
    InsufficientDataError,
    LinearBackend,
    PolynomialBackend,
    ExponentialBackend,
    LogarithmicBackend,
    PowerBackend,
    LogisticBackend,
)
from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind
from pycurves.regression.solution import FitResult

_BACKENDS: dict[ModelKind, type[CurveBackend]] = {
    ModelKind.LINEAR: LinearBackend,
    ModelKind.EXPONENTIAL: ExponentialBackend,
    ModelKind.LOGARITHMIC: LogarithmicBackend,
    ModelKind.POWER: PowerBackend,
    ModelKind.LOGISTIC: LogisticBackend,
}


def fit(
    samples: Any,
    kind: ModelKind | str = ModelKind.LINEAR,
    *,
    degree: int = 2,
    config: FitConfig | None = None,
) -> FitResult | None:
    """
    Fit one regression model.

    This is the primary public API. All input validation, backend selection,
    and result wrapping happens here.

    Args:
        samples: SampleSet, sequence of (x, y) pairs, or (n, 2) array
        kind: Model kind (ModelKind or its string value):
            - 'linear': y = a + bx
            - 'polynomial': y = c0 + c1·x + ... + cd·x^d
            - 'exponential': y = a·e^(bx), uses samples with y > 0
            - 'logarithmic': y = a + b·ln(x), uses samples with x > 0
            - 'power': y = a·x^b, uses samples with x > 0 and y > 0
            - 'logistic': y = 1/(1 + e^−(b0 + b1·x)), uses y in [0, 1]
        degree: Polynomial degree (ignored by other kinds)
        config: Numerical settings; DEFAULT_CONFIG when None

    Returns:
        FitResult, or None if the data cannot support the model

    Raises:
        ValueError: If the model kind is unknown
        ValidationError: If samples are malformed or degree < 1
        ConvergenceError: Only with config.strict_convergence, when the
            logistic fit hits its iteration cap

    Example:
        >>> from pycurves.regression import fit
        >>> result = fit([(0, 2), (1, 5), (2, 8), (3, 11)], 'linear')
        >>> result.coefficients
        (2.0, 3.0)
        >>> result.predict(4.0)
        14.0
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    model = ModelKind.parse(kind)
    sample_set = SampleSet.build(samples)
    config = DEFAULT_CONFIG if config is None else config

    # === Select Backend ===
    backend = _get_backend(model, degree)

    # === Solve ===
    try:
        result, used = backend.solve(sample_set, config)
    except (InsufficientDataError, NumericalError):
        return None

    # === Wrap and Return ===
    return FitResult(_result=result, _kind=model, _samples=used)


def fit_linear(samples: Any, *, config: FitConfig | None = None) -> FitResult | None:
    """Least squares line y = intercept + slope·x."""
    return fit(samples, ModelKind.LINEAR, config=config)


def fit_polynomial(
    samples: Any,
    degree: int = 2,
    *,
    config: FitConfig | None = None,
) -> FitResult | None:
    """Least squares polynomial of the given degree (needs degree + 1 samples)."""
    return fit(samples, ModelKind.POLYNOMIAL, degree=degree, config=config)


def fit_exponential(samples: Any, *, config: FitConfig | None = None) -> FitResult | None:
    """y = a·e^(bx), fitted on the samples with y > 0."""
    return fit(samples, ModelKind.EXPONENTIAL, config=config)


def fit_logarithmic(samples: Any, *, config: FitConfig | None = None) -> FitResult | None:
    """y = a + b·ln(x), fitted on the samples with x > 0."""
    return fit(samples, ModelKind.LOGARITHMIC, config=config)


def fit_power(samples: Any, *, config: FitConfig | None = None) -> FitResult | None:
    """y = a·x^b, fitted on the samples with x > 0 and y > 0."""
    return fit(samples, ModelKind.POWER, config=config)


def fit_logistic(samples: Any, *, config: FitConfig | None = None) -> FitResult | None:
    """y = σ(b0 + b1·x), fitted on the samples with y in [0, 1]."""
    return fit(samples, ModelKind.LOGISTIC, config=config)


def _get_backend(kind: ModelKind, degree: int) -> CurveBackend:
    """
    Instantiate the backend for a model kind.

    Raises:
        ValidationError: If kind is polynomial and degree is not a positive int
    """
    if kind is ModelKind.POLYNOMIAL:
        return PolynomialBackend(degree)
    return _BACKENDS[kind]()
