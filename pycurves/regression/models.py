"""
Model kinds and structural eligibility.
"""

from enum import Enum

import numpy as np

from pycurves.core.validation import check_positive_int
from pycurves.regression.design import SampleSet


class ModelKind(str, Enum):
    """Regression model families, in the fixed evaluation order."""
    LINEAR = 'linear'
    POLYNOMIAL = 'polynomial'
    EXPONENTIAL = 'exponential'
    LOGARITHMIC = 'logarithmic'
    POWER = 'power'
    LOGISTIC = 'logistic'

    @classmethod
    def parse(cls, kind: 'ModelKind | str') -> 'ModelKind':
        """
        Resolve a ModelKind from an enum member or its string value.

        Raises:
            ValueError: If the kind is unknown
        """
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            valid = ', '.join(k.value for k in cls)
            raise ValueError(f"Unknown model kind: {kind!r} (expected one of {valid})") from None

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} Regression"


# Evaluation order for "calculate all models"; ties in R² go to the earlier kind.
EVALUATION_ORDER: tuple[ModelKind, ...] = tuple(ModelKind)


def available_model_kinds(samples, *, degree: int = 2) -> frozenset[ModelKind]:
    """
    Model kinds that are structurally eligible for the given samples.

    Eligibility is necessary, not sufficient: an eligible kind can still come
    back as no result (singular normal equations, constant x, ...).

    Rules:
        - nothing is eligible with fewer than 2 samples
        - linear: n >= 2
        - polynomial: n >= degree + 1
        - exponential: every y > 0
        - logarithmic: every x > 0
        - power: every x > 0 and every y > 0
        - logistic: some y in [0, 1]

    Args:
        samples: SampleSet or sequence of (x, y) pairs
        degree: Polynomial degree the caller intends to use

    Returns:
        frozenset of eligible ModelKind members
    """
    samples = SampleSet.build(samples)
    degree = check_positive_int(degree, 'degree')
    if samples.n < 2:
        return frozenset()

    x, y = samples.x, samples.y
    kinds = {ModelKind.LINEAR}
    if samples.n >= degree + 1:
        kinds.add(ModelKind.POLYNOMIAL)
    if np.all(y > 0):
        kinds.add(ModelKind.EXPONENTIAL)
    if np.all(x > 0):
        kinds.add(ModelKind.LOGARITHMIC)
    if np.all(x > 0) and np.all(y > 0):
        kinds.add(ModelKind.POWER)
    if np.any((y >= 0) & (y <= 1)):
        kinds.add(ModelKind.LOGISTIC)
    return frozenset(kinds)
