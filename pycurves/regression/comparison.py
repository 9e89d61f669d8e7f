"""
Fit several model kinds on one sample set and rank them.

The kinds are independent fits; only the choice of the best model (highest
R², ties going to the kind evaluated first) needs all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import math

from pycurves.core.compute.timing import timed
from pycurves.core.compute.tolerances import FitConfig
from pycurves.regression.design import SampleSet
from pycurves.regression.models import EVALUATION_ORDER, ModelKind, available_model_kinds
from pycurves.regression.solution import FitResult
from pycurves.regression.solvers import fit


@dataclass(frozen=True)
class ModelComparison:
    """
    Outcome of fitting several model kinds to the same samples.

    Attributes:
        results: Successful fits, in evaluation order
        failed: Kinds that were attempted but gave no result
        skipped: Requested kinds that were not structurally eligible
        timing: Execution timing breakdown per kind
    """
    results: dict[ModelKind, FitResult]
    failed: tuple[ModelKind, ...]
    skipped: tuple[ModelKind, ...]
    timing: dict[str, float]

    def ranking(self) -> list[FitResult]:
        """Successful fits sorted by R², best first (stable for ties)."""
        return sorted(self.results.values(), key=lambda r: r.r_squared, reverse=True)

    @property
    def best(self) -> FitResult | None:
        ranked = self.ranking()
        return ranked[0] if ranked else None

    @property
    def best_kind(self) -> ModelKind | None:
        best = self.best
        return best.kind if best is not None else None

    @property
    def mean_r_squared(self) -> float:
        if not self.results:
            return float('nan')
        return math.fsum(r.r_squared for r in self.results.values()) / len(self.results)

    @property
    def r_squared_spread(self) -> float:
        """Best R² minus worst R²."""
        ranked = self.ranking()
        if not ranked:
            return float('nan')
        return ranked[0].r_squared - ranked[-1].r_squared

    def __getitem__(self, kind: ModelKind | str) -> FitResult:
        return self.results[ModelKind.parse(kind)]

    def __contains__(self, kind: Any) -> bool:
        try:
            return ModelKind.parse(kind) in self.results
        except ValueError:
            return False

    def summary(self) -> str:
        """Text table of the fitted models, best first."""
        lines = [
            "Model Comparison",
            "=" * 72,
            f"{'Model':<14} {'R²':>10} {'Adj. R²':>10} {'AIC':>12} {'RMSE':>12}  Quality",
            "-" * 72,
        ]
        for r in self.ranking():
            m = r.metrics
            lines.append(
                f"{r.kind.value:<14} {m.r_squared:>10.4f} {m.adjusted_r_squared:>10.4f} "
                f"{m.aic:>12.4f} {m.rmse:>12.4f}  {r.quality}"
            )
        lines.append("-" * 72)
        best = self.best
        if best is None:
            lines.append("No model could be fitted")
        else:
            lines.append(f"Best: {best.kind.value} (R² {best.r_squared:.4f})")
            lines.append(f"Mean R²: {self.mean_r_squared:.4f}")
            lines.append(f"R² spread: {self.r_squared_spread * 100:.1f}%")
        if self.failed:
            lines.append("No result: " + ", ".join(k.value for k in self.failed))
        if self.skipped:
            lines.append("Not eligible: " + ", ".join(k.value for k in self.skipped))
        return "\n".join(lines)


def compare_models(
    samples: Any,
    *,
    kinds: Iterable[ModelKind | str] | None = None,
    degree: int = 2,
    config: FitConfig | None = None,
) -> ModelComparison:
    """
    Fit every requested model kind and rank the results by R².

    Kinds are always evaluated in the fixed order linear, polynomial,
    exponential, logarithmic, power, logistic, whatever order they are
    requested in.

    Args:
        samples: SampleSet, sequence of (x, y) pairs, or (n, 2) array
        kinds: Kinds to try. None means every kind; kinds that are not
            structurally eligible for the data are skipped either way.
        degree: Polynomial degree
        config: Numerical settings shared by all fits

    Returns:
        ModelComparison
    """
    sample_set = SampleSet.build(samples)
    requested = (
        set(EVALUATION_ORDER) if kinds is None
        else {ModelKind.parse(k) for k in kinds}
    )
    eligible = available_model_kinds(sample_set, degree=degree)

    results: dict[ModelKind, FitResult] = {}
    failed: list[ModelKind] = []
    skipped: list[ModelKind] = []
    with timed() as timer:
        for kind in EVALUATION_ORDER:
            if kind not in requested:
                continue
            if kind not in eligible:
                skipped.append(kind)
                continue
            with timer.section(kind.value):
                result = fit(sample_set, kind, degree=degree, config=config)
            if result is None:
                failed.append(kind)
            else:
                results[kind] = result

    return ModelComparison(
        results=results,
        failed=tuple(failed),
        skipped=tuple(skipped),
        timing=timer.result(),
    )
