from __future__ import annotations

from collections.abc import Iterator

import numpy as np


def as_age(age) -> np.float64:
    """
    Coerce an age to a numpy float so that the formulas follow numpy's
    floating-point rules (inf/nan instead of Python exceptions or complex
    results).
    """
    return np.float64(age)


def as_param(value) -> np.float64:
    """Parameter counterpart of as_age, for divisions by a parameter."""
    return np.float64(value)


class ParametricMortality:
    """
    Common surface of every mortality law.

    Subclasses are frozen dataclasses holding the law's parameters and
    implement hazard(age). A law that has a closed form for the cumulative
    hazard or the survivorship defines cumhazard(age) / survivorship(age);
    this class deliberately does not, so that mortality_laws.survival can
    tell the two cases apart.
    """

    def hazard(self, age: float) -> float:
        raise NotImplementedError(f"{type(self).__name__} does not define hazard()")

    def __call__(self, age):
        """
        Force of mortality at age. A sequence or array of ages gives an array
        of the same shape; an iterator of ages gives a 1D array.
        """
        if isinstance(age, Iterator):
            age = list(age)
        if np.ndim(age) == 0:
            return self.hazard(age)
        ages = np.asarray(age, dtype=float)
        values = [self.hazard(x) for x in ages.ravel()]
        return np.array(values, dtype=float).reshape(ages.shape)

    def __getitem__(self, age):
        return self(age)
