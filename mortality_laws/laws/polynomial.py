from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from mortality_laws.laws.base import ParametricMortality, as_age


@dataclass(frozen=True)
class Opperman(ParametricMortality):
    """
    Opperman's law for infant and early-childhood mortality:

      mu_x = a / sqrt(x + 1) - b + c * sqrt(x + 1)

    floored at zero.
    """
    a: float = 0.04
    b: float = 0.0004
    c: float = 0.001

    def hazard(self, age: float) -> float:
        r = np.sqrt(as_age(age) + 1.0)
        return float(max(self.a / r - self.b + self.c * r, 0.0))


@dataclass(frozen=True)
class Quadratic(ParametricMortality):
    """mu_x = a + b x + c x^2"""
    a: float = 0.01
    b: float = 1.0
    c: float = 0.01

    def hazard(self, age: float) -> float:
        x = as_age(age)
        return float(self.a + self.b * x + self.c * x ** 2)


@dataclass(frozen=True)
class VanderMaen(ParametricMortality):
    """
    Van der Maen's law:

      mu_x = a + b x + c x^2 + i / (n - x)

    n acts as a limiting age; the hazard is unbounded as x approaches it.
    """
    a: float = 0.01
    b: float = 1.0
    c: float = 0.01
    i: float = 100.0
    n: float = 200.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        return float(self.a + self.b * x + self.c * x ** 2 + self.i / (self.n - x))


@dataclass(frozen=True)
class VanderMaen2(ParametricMortality):
    """Van der Maen's law without the quadratic term."""
    a: float = 0.01
    b: float = 1.0
    i: float = 100.0
    n: float = 200.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        return float(self.a + self.b * x + self.i / (self.n - x))
