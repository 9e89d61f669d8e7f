"""
Goodness-of-fit and significance statistics.

Every quantity here is a function of three things only: the samples a fit
actually used (after model filtering), the model's predictions on them, and
the number of fitted parameters. Transform-based models are always scored on
the original scale.

Undefined statistics:
    Some statistics have no value for small n relative to p (adjusted R²
    needs n - p - 1 > 0, the standard error and F-statistic need n - p > 0,
    F also needs p > 1). Those fields are NaN. A perfect fit (SS_res = 0)
    gives F = inf with p-value 0, and AIC = BIC = -inf. MAPE skips samples
    with y = 0 and is NaN when every y is 0.

References:
    Burnham, K. P., & Anderson, D. R. (2002). Model Selection and Multimodel
    Inference (2nd ed.), for the Gaussian log-likelihood form of AIC/BIC.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pycurves.core.exceptions import ValidationError
from pycurves.core.validation import check_array, check_1d, check_consistent_length
from pycurves.regression.design import SampleSet

# Relative size of SS_res, against sum(y^2), treated as an exact fit
_PERFECT_FIT_RTOL = 1e-20


@dataclass(frozen=True)
class Metrics:
    """
    Error and significance statistics of one fit.

    Attributes:
        n: Number of samples used
        n_params: Number of fitted parameters (p)
        mae: Mean absolute error
        mse: Mean squared error
        rmse: Root mean squared error
        mape: Mean absolute percentage error, in percent
        r_squared: Coefficient of determination
        adjusted_r_squared: R² penalized for p
        aic: Akaike information criterion
        bic: Bayesian information criterion
        standard_error: Standard error of the estimate, sqrt(SS_res/(n-p))
        f_statistic: (SS_reg/(p-1)) / (SS_res/(n-p))
        p_value: Upper tail probability of f_statistic under F(p-1, n-p)
    """
    n: int
    n_params: int
    mae: float
    mse: float
    rmse: float
    mape: float
    r_squared: float
    adjusted_r_squared: float
    aic: float
    bic: float
    standard_error: float
    f_statistic: float
    p_value: float

    def as_dict(self) -> dict[str, Any]:
        """Return metrics as a plain dictionary."""
        return asdict(self)


def r_squared(y: NDArray[np.floating[Any]], predictions: NDArray[np.floating[Any]]) -> float:
    """
    Coefficient of determination 1 - SS_res/SS_tot.

    When every y is equal SS_tot is 0 and the ratio is undefined. The
    convention is R² = 1.0 if the model reproduces y exactly, else 0.0.
    """
    residuals = y - predictions
    ss_res = float(residuals @ residuals)
    ss_tot = float(np.sum((y - np.mean(y)) ** 2)) if y.size else 0.0
    if ss_tot == 0.0:
        return 1.0 if _is_perfect(ss_res, y) else 0.0
    return 1.0 - ss_res / ss_tot


def compute_metrics(
    samples_used: SampleSet,
    predictions: ArrayLike,
    num_params: int,
) -> Metrics:
    """
    Compute all fit statistics from residuals.

    Args:
        samples_used: The exact samples the fit was computed on
        predictions: Model predictions aligned with samples_used
        num_params: Number of fitted parameters p

    Returns:
        Metrics record (see module docstring for NaN/inf conventions)

    Raises:
        DimensionError: If predictions and samples differ in length
        ValidationError: If samples_used is empty
    """
    y = samples_used.y
    y_hat = check_array(predictions, 'predictions')
    check_1d(y_hat, 'predictions')
    check_consistent_length(y, y_hat, names=('samples_used', 'predictions'))

    n = samples_used.n
    p = int(num_params)
    if n == 0:
        raise ValidationError("samples_used: cannot compute metrics on zero samples")

    residuals = y - y_hat
    abs_res = np.abs(residuals)
    ss_res = float(residuals @ residuals)
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    perfect = _is_perfect(ss_res, y)

    mae = float(np.mean(abs_res))
    mse = ss_res / n
    rmse = math.sqrt(mse)

    nonzero = y != 0
    if np.any(nonzero):
        mape = float(np.mean(abs_res[nonzero] / np.abs(y[nonzero]))) * 100.0
    else:
        mape = float('nan')

    r2 = r_squared(y, y_hat)

    dof_adj = n - p - 1
    adjusted = 1.0 - (1.0 - r2) * (n - 1) / dof_adj if dof_adj > 0 else float('nan')

    dof_res = n - p
    standard_error = math.sqrt(ss_res / dof_res) if dof_res > 0 else float('nan')

    f_statistic, p_value = _f_test(ss_tot, ss_res, perfect, n, p)

    if perfect or mse == 0.0:
        aic = bic = float('-inf')
    else:
        log_likelihood = -0.5 * n * math.log(2.0 * math.pi * mse) - 0.5 * n
        aic = 2.0 * p - 2.0 * log_likelihood
        bic = math.log(n) * p - 2.0 * log_likelihood

    return Metrics(
        n=n,
        n_params=p,
        mae=mae,
        mse=mse,
        rmse=rmse,
        mape=mape,
        r_squared=r2,
        adjusted_r_squared=adjusted,
        aic=aic,
        bic=bic,
        standard_error=standard_error,
        f_statistic=f_statistic,
        p_value=p_value,
    )


def _f_test(ss_tot: float, ss_res: float, perfect: bool, n: int, p: int) -> tuple[float, float]:
    """Overall F-test of the model against the mean-only model."""
    df_model = p - 1
    df_resid = n - p
    if df_model <= 0 or df_resid <= 0:
        return float('nan'), float('nan')

    ss_reg = ss_tot - ss_res
    if perfect:
        if ss_reg > 0:
            return float('inf'), 0.0
        return float('nan'), float('nan')

    f_statistic = (ss_reg / df_model) / (ss_res / df_resid)
    p_value = float(sp_stats.f.sf(f_statistic, df_model, df_resid))
    return float(f_statistic), p_value


def _is_perfect(ss_res: float, y: NDArray[np.floating[Any]]) -> bool:
    scale = max(1.0, float(y @ y)) if y.size else 1.0
    return ss_res <= _PERFECT_FIT_RTOL * scale
