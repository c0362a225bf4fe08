from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from mortality_laws.laws.base import ParametricMortality, as_age, as_param


@dataclass(frozen=True)
class Thiele(ParametricMortality):
    """
    Thiele's three-component law covering the whole life span:

      mu1 = a * exp(-b x)                    infant mortality
      mu2 = c * exp(-0.5 d (x - e)^2)        young-adult (accident) hump
      mu3 = f * exp(g x)                     senescence

    The hump is left out at exactly age 0.
    """
    a: float = 0.02474
    b: float = 0.3
    c: float = 0.004
    d: float = 0.5
    e: float = 25.0
    f: float = 0.0001
    g: float = 0.13

    def hazard(self, age: float) -> float:
        x = as_age(age)
        mu1 = self.a * np.exp(-self.b * x)
        mu2 = self.c * np.exp(-0.5 * self.d * (x - self.e) ** 2)
        mu3 = self.f * np.exp(self.g * x)

        if x == 0.0:
            return float(mu1 + mu3)
        return float(mu1 + mu2 + mu3)


@dataclass(frozen=True)
class Wittstein(ParametricMortality):
    """
    Wittstein's law:

      mu_x = (1/b) * a^(-(b x)^n) + a^(-(m - x)^n)

    m is the maximum attainable age; beyond it (m - x)^n is nan for
    fractional n.
    """
    a: float = 1.5
    b: float = 1.0
    n: float = 0.5
    m: float = 100.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        infant = (1.0 / as_param(self.b)) * np.power(self.a, -np.power(self.b * x, self.n))
        old_age = np.power(self.a, -np.power(self.m - x, self.n))
        return float(infant + old_age)
