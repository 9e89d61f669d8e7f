"""
Regression solution types.

Contains the parameter payload produced by backends and the user-facing
FitResult wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurves.core.result import Result
from pycurves.regression.design import SampleSet
from pycurves.regression.metrics import Metrics
from pycurves.regression.models import ModelKind


def quality_label(r2: float) -> str:
    """Qualitative grade of an R² value: excellent, good, fair or poor."""
    if r2 >= 0.9:
        return 'excellent'
    if r2 >= 0.7:
        return 'good'
    if r2 >= 0.5:
        return 'fair'
    return 'poor'


@dataclass(frozen=True)
class CurveParams:
    """
    Parameter payload for a fitted curve.

    This is the immutable data computed by backends.
    """
    coefficients: tuple[float, ...]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    metrics: Metrics
    equation: str
    predictor: Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]


@dataclass(frozen=True, eq=False)
class FitResult:
    """
    User-facing result of one fit.

    Wraps the backend Result together with the model kind and the samples the
    fit actually used (after model-specific filtering).
    """
    _result: Result[CurveParams]
    _kind: ModelKind
    _samples: SampleSet

    @property
    def kind(self) -> ModelKind:
        return self._kind

    @property
    def coefficients(self) -> tuple[float, ...]:
        """
        Fitted coefficients.

        [intercept, slope] for linear, [c0, ..., cd] for polynomial,
        [a, b] for exponential, logarithmic and power, [b0, b1] for logistic.
        """
        return self._result.params.coefficients

    @property
    def r_squared(self) -> float:
        """R² on the original (untransformed) scale."""
        return self._result.params.metrics.r_squared

    @property
    def predicted_points(self) -> NDArray[np.floating[Any]]:
        """Predictions aligned with `samples`, in the same order."""
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def metrics(self) -> Metrics:
        return self._result.params.metrics

    @property
    def display_equation(self) -> str:
        return self._result.params.equation

    @property
    def samples(self) -> SampleSet:
        """Samples used by the fit (input order, filtered)."""
        return self._samples

    @property
    def n_observations(self) -> int:
        return self._samples.n

    @property
    def n_params(self) -> int:
        return self._result.params.metrics.n_params

    @property
    def quality(self) -> str:
        return quality_label(self.r_squared)

    @property
    def info(self) -> dict[str, Any]:
        return dict(self._result.info)

    @property
    def converged(self) -> bool:
        """False only for an iterative fit that hit its iteration cap."""
        return bool(self._result.info.get('converged', True))

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def predict(self, x: float | ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Evaluate the fitted curve.

        Returns a float for scalar input and an array otherwise. Evaluating
        at a sample's x reproduces its entry in `predicted_points`.
        """
        arr = np.asarray(x, dtype=np.float64)
        values = self._result.params.predictor(arr.reshape(-1))
        if arr.ndim == 0:
            return float(values[0])
        return values.reshape(arr.shape)

    def as_dict(self) -> dict[str, Any]:
        """Plain-data view for serialization."""
        return {
            'kind': self._kind.value,
            'coefficients': list(self.coefficients),
            'r_squared': self.r_squared,
            'equation': self.display_equation,
            'points': [
                {'x': float(xi), 'y': float(yi)}
                for xi, yi in zip(self._samples.x, self.predicted_points)
            ],
            'metrics': self.metrics.as_dict(),
            'info': self.info,
            'warnings': list(self.warnings),
        }

    def summary(self) -> str:
        """Generate a text report of the fit."""
        m = self.metrics
        lines = [
            self._kind.display_name,
            "=" * 60,
            f"Equation: {self.display_equation}",
            f"Observations: {m.n}",
            f"Parameters: {m.n_params}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.coefficients):
            lines.append(f"  β[{i}]: {coef:14.6f}")
        lines.extend([
            "-" * 60,
            f"R-squared: {m.r_squared:.6f} ({self.quality})",
            f"Adj. R-squared: {_fmt(m.adjusted_r_squared)}",
            f"Residual Std. Error: {_fmt(m.standard_error)} on {m.n - m.n_params} DF",
            f"F-statistic: {_fmt(m.f_statistic)}, p-value: {_fmt(m.p_value, '.4g')}",
            f"AIC: {_fmt(m.aic)}  BIC: {_fmt(m.bic)}",
            f"MAE: {m.mae:.6f}  MSE: {m.mse:.6f}  RMSE: {m.rmse:.6f}",
            f"MAPE: {_fmt(m.mape, '.2f')}%",
        ])
        if not self.converged:
            lines.append(f"Converged: no ({self._result.info.get('iterations')} iterations)")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitResult(kind={self._kind.value!r}, n={self.n_observations}, "
            f"r_squared={self.r_squared:.4f})"
        )


def _fmt(value: float, spec: str = '.6f') -> str:
    if math.isnan(value):
        return "NA"
    return format(value, spec)
