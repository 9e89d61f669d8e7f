"""
Shared machinery for curve-fitting backends.

A backend turns a validated SampleSet into a Result[CurveParams]. Each
subclass only has to filter its samples, estimate coefficients and describe
its curve; scoring on the original scale and result assembly happen here so
every model kind is measured the same way.

Backends raise on failure (InsufficientDataError, NumericalError,
SingularMatrixError). Turning those into "no result" is the solvers' job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import FitConfig
from pycurves.core.exceptions import NumericalError, ValidationError
from pycurves.core.result import Result
from pycurves.regression.design import SampleSet
from pycurves.regression.metrics import compute_metrics
from pycurves.regression.models import ModelKind
from pycurves.regression.solution import CurveParams

Predictor = Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]


class InsufficientDataError(ValidationError):
    """
    Fewer usable samples than the model needs.

    Attributes:
        n_available: Samples left after model filtering
        n_required: Minimum the model needs
    """

    def __init__(self, message: str, n_available: int, n_required: int):
        super().__init__(message)
        self.n_available = n_available
        self.n_required = n_required


class CurveBackend(ABC):
    """Base class for one model kind's fitter."""

    kind: ModelKind
    min_samples: int = 2

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def n_params(self) -> int:
        return 2

    def select(self, samples: SampleSet) -> NDArray[np.bool_]:
        """Mask of samples inside the model's domain. Default: all of them."""
        return np.ones(samples.n, dtype=bool)

    @abstractmethod
    def estimate(
        self,
        samples: SampleSet,
        config: FitConfig,
        timer: Timer,
    ) -> tuple[tuple[float, ...], dict[str, Any], list[str]]:
        """
        Estimate coefficients on the filtered samples.

        Returns:
            (coefficients, extra info, warnings)
        """
        ...

    @abstractmethod
    def predictor(self, coefficients: tuple[float, ...]) -> Predictor:
        """Vectorized curve y = f(x) for the given coefficients."""
        ...

    @abstractmethod
    def equation(self, coefficients: tuple[float, ...], precision: int) -> str:
        """Human-readable equation."""
        ...

    def solve(self, samples: SampleSet, config: FitConfig) -> tuple[Result[CurveParams], SampleSet]:
        """
        Fit the model.

        Algorithm:
            1. Keep the samples inside the model's domain
            2. Estimate coefficients (closed form, normal equations or
               gradient descent, depending on the subclass)
            3. Predict on the original scale and score the residuals

        Returns:
            The Result and the filtered SampleSet it was computed on

        Raises:
            InsufficientDataError: If too few samples survive filtering
            NumericalError: If the estimate is degenerate or non-finite
        """
        timer = Timer()
        timer.start()

        with timer.section('filter'):
            mask = self.select(samples)
            used = samples if mask.all() else samples.filter(mask)
        n_dropped = samples.n - used.n
        if used.n < self.min_samples:
            raise InsufficientDataError(
                f"{self.name}: {used.n} usable samples, at least {self.min_samples} required",
                n_available=used.n,
                n_required=self.min_samples,
            )

        coefficients, extra_info, warnings_list = self.estimate(used, config, timer)
        if not all(np.isfinite(c) for c in coefficients):
            raise NumericalError(f"{self.name}: non-finite coefficients {coefficients}")
        coefficients = tuple(float(c) for c in coefficients)

        with timer.section('predict'):
            predict = self.predictor(coefficients)
            fitted = predict(used.x)
            if not np.all(np.isfinite(fitted)):
                raise NumericalError(f"{self.name}: non-finite predictions on the fitted samples")
            residuals = used.y - fitted

        with timer.section('metrics'):
            metrics = compute_metrics(used, fitted, self.n_params)

        timer.stop()

        if n_dropped:
            warnings_list = [
                f"{self.name}: dropped {n_dropped} of {samples.n} samples outside the model domain",
                *warnings_list,
            ]

        fitted.setflags(write=False)
        residuals.setflags(write=False)
        params = CurveParams(
            coefficients=coefficients,
            fitted_values=fitted,
            residuals=residuals,
            metrics=metrics,
            equation=self.equation(coefficients, config.precision),
            predictor=predict,
        )

        info: dict[str, Any] = {
            'n_dropped': n_dropped,
            **extra_info,
        }

        result = Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
        return result, used


def fmt_coef(value: float, precision: int) -> str:
    """Format a coefficient with fixed decimals."""
    return f"{value:.{precision}f}"


def fmt_term(value: float, precision: int, suffix: str = '') -> str:
    """Format a trailing term as '+ c<suffix>' or '- c<suffix>'."""
    sign = '-' if value < 0 else '+'
    return f"{sign} {abs(value):.{precision}f}{suffix}"
