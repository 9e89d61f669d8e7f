"""
pycurves: curve fitting and fit diagnostics for two-variable data.

Fits linear, polynomial, exponential, logarithmic, power and logistic
models to (x, y) samples and reports R², adjusted R², AIC, BIC, F-statistic,
p-value, standard error and the usual error means.

Submodules:
    regression: Model fitting, metrics and model comparison
    core: Shared infrastructure (exceptions, results, configuration, linalg)
"""

__version__ = "0.1.0"

from pycurves import regression
from pycurves.core.compute.tolerances import FitConfig, DEFAULT_CONFIG
from pycurves.core.datasource import DataSource
from pycurves.regression import (
    SampleSet,
    ModelKind,
    fit,
    available_model_kinds,
    compare_models,
)

__all__ = [
    "__version__",
    "regression",
    "FitConfig",
    "DEFAULT_CONFIG",
    "DataSource",
    "SampleSet",
    "ModelKind",
    "fit",
    "available_model_kinds",
    "compare_models",
]
