from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from mortality_laws.laws.base import ParametricMortality, as_age, as_param


@dataclass(frozen=True)
class Weibull(ParametricMortality):
    """
    Weibull law with location m > 0 and dispersion sigma > 0:

      mu_x = (1/sigma) * (x/m)^(m/sigma - 1)

    If sigma > m the hazard is non-increasing in x (density mode at 0);
    if sigma < m it is increasing. The hazard at exactly age 0 is taken
    to be 1.0.
    """
    m: float = 1.0
    sigma: float = 2.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        if x == 0.0:
            return 1.0
        shape = as_param(self.m) / self.sigma
        return float(1.0 / as_param(self.sigma) * np.power(x / self.m, shape - 1.0))

    def cumhazard(self, age: float) -> float:
        x = as_age(age)
        return float(np.power(x / self.m, as_param(self.m) / self.sigma))

    def survivorship(self, age: float) -> float:
        return float(np.exp(-self.cumhazard(age)))


@dataclass(frozen=True)
class InverseWeibull(ParametricMortality):
    """
    Inverse-Weibull (Frechet) law with location m > 0 and dispersion sigma > 0.

    log mu_x is concave, which suits childhood and teenage mortality.
    """
    m: float = 5.0
    sigma: float = 10.0

    def hazard(self, age: float) -> float:
        x = as_age(age)
        shape = as_param(self.m) / self.sigma
        return float(
            (1.0 / as_param(self.sigma))
            * np.power(x / self.m, -shape - 1.0)
            / (np.exp(np.power(x / self.m, -shape)) - 1.0)
        )

    def cumhazard(self, age: float) -> float:
        x = as_age(age)
        return float(-np.log(1.0 - np.exp(-np.power(x / self.m, -as_param(self.m) / self.sigma))))

    def survivorship(self, age: float) -> float:
        return float(np.exp(-self.cumhazard(age)))
