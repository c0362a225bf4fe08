from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from mortality_laws.laws.base import ParametricMortality, as_age, as_param


@dataclass(frozen=True)
class Makeham(ParametricMortality):
    """
    Makeham's law:

      mu_x = a * exp(b * x) + c

    a is the senescent level, b the rate of ageing and c the
    age-independent (accident) hazard.
    """
    a: float = 0.0002
    b: float = 0.13
    c: float = 0.001

    def hazard(self, age: float) -> float:
        x = as_age(age)
        return float(self.a * np.exp(self.b * x) + self.c)

    def cumhazard(self, age: float) -> float:
        x = as_age(age)
        return float(as_param(self.a) / self.b * (np.exp(self.b * x) - 1.0) + self.c * x)

    def survivorship(self, age: float) -> float:
        return float(np.exp(-self.cumhazard(age)))


def Gompertz(a: float = 0.0002, b: float = 0.13) -> Makeham:
    """
    Gompertz' law, mu_x = a * exp(b * x).

    This is Makeham's law without the constant term, so it is returned as a
    Makeham instance with c = 0.
    """
    return Makeham(a=a, b=b, c=0.0)


@dataclass(frozen=True)
class InverseGompertz(ParametricMortality):
    """
    Inverse-Gompertz law with location m and dispersion sigma.

      mu_x = (1/sigma) * exp(-(x - m)/sigma) / (exp(exp(-(x - m)/sigma)) - 1)

    Survivorship is normalised so that S(0) = 1.
    """
    m: float = 49.0
    sigma: float = 7.7

    def hazard(self, age: float) -> float:
        x = as_age(age)
        z = np.exp(-(x - self.m) / self.sigma)
        return float(1.0 / as_param(self.sigma) * z / (np.exp(z) - 1.0))

    def cumhazard(self, age: float) -> float:
        return float(-np.log(self.survivorship(age)))

    def survivorship(self, age: float) -> float:
        x = as_age(age)
        num = 1.0 - np.exp(-np.exp(-(x - self.m) / self.sigma))
        den = 1.0 - np.exp(-np.exp(as_param(self.m) / self.sigma))
        return float(num / den)


@dataclass(frozen=True)
class Perks(ParametricMortality):
    """
    Perks' logistic law:

      mu_x = (a + b * c^x) / (b * c^-x + 1 + d * c^x)
    """
    a: float = 0.002
    b: float = 0.13
    c: float = 0.01
    d: float = 0.01

    def hazard(self, age: float) -> float:
        x = as_age(age)
        cx = np.power(self.c, x)
        return float((self.a + self.b * cx) / (self.b * np.power(self.c, -x) + 1.0 + self.d * cx))


@dataclass(frozen=True)
class Beard(ParametricMortality):
    """Beard's law, mu_x = a e^(bx) / (1 + k a e^(bx))."""
    a: float = 0.002
    b: float = 0.13
    k: float = 1.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        g = self.a * np.exp(self.b * x)
        return float(g / (1.0 + self.k * g))


@dataclass(frozen=True)
class MakehamBeard(ParametricMortality):
    """Beard's law with an additive Makeham constant c."""
    a: float = 0.002
    b: float = 0.13
    c: float = 0.01
    k: float = 1.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        g = self.a * np.exp(self.b * x)
        return float(g / (1.0 + self.k * g) + self.c)


@dataclass(frozen=True)
class StrehlerMildvan(ParametricMortality):
    """
    Strehler-Mildvan law:

      mu_x = k * exp(-v0 * (1 - b * x) / d)

    v0 is the initial vitality, b its linear rate of loss with age and d the
    mean energy of the challenges to it.
    """
    k: float = 0.01
    v0: float = 2.5
    b: float = 0.2
    d: float = 6.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        return float(self.k * np.exp(-self.v0 * (1.0 - self.b * x) / self.d))
