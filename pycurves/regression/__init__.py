"""
Curve fitting for (x, y) samples.

Model kinds: linear, polynomial, exponential, logarithmic, power, logistic.

Public API:
    fit(samples, kind, ...) -> FitResult | None
    fit_linear / fit_polynomial / fit_exponential / fit_logarithmic /
    fit_power / fit_logistic
    available_model_kinds(samples) -> frozenset[ModelKind]
    compare_models(samples, ...) -> ModelComparison
    compute_metrics(samples_used, predictions, num_params) -> Metrics

A fit returns None when the data cannot support the model; check for it
before using the result.

Example:
    >>> from pycurves.regression import fit
    >>> result = fit(pairs, 'exponential')
    >>> if result is not None:
    ...     print(result.display_equation, result.r_squared)
    ...     print(result.summary())
"""

from pycurves.regression.design import SampleSet
from pycurves.regression.models import ModelKind, available_model_kinds
from pycurves.regression.metrics import Metrics, compute_metrics
from pycurves.regression.solution import FitResult, CurveParams, quality_label
from pycurves.regression.solvers import (
    fit,
    fit_linear,
    fit_polynomial,
    fit_exponential,
    fit_logarithmic,
    fit_power,
    fit_logistic,
)
from pycurves.regression.comparison import ModelComparison, compare_models

__all__ = [
    "fit",
    "fit_linear",
    "fit_polynomial",
    "fit_exponential",
    "fit_logarithmic",
    "fit_power",
    "fit_logistic",
    "available_model_kinds",
    "compare_models",
    "compute_metrics",
    "quality_label",
    "SampleSet",
    "ModelKind",
    "Metrics",
    "FitResult",
    "CurveParams",
    "ModelComparison",
]
