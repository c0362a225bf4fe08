from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import pandas as pd

from mortality_laws.laws.base import ParametricMortality
from mortality_laws.quadrature import integrate

logger = logging.getLogger(__name__)

Integrator = Callable[[Callable[[float], float], float, float], float]


def _closed_form(model: ParametricMortality, name: str):
    """
    Return the law's closed-form method `name`, or None when the law only
    defines a hazard.
    """
    return getattr(model, name, None)


def force_of_mortality(model: ParametricMortality, age):
    """
    mu_x: the force of mortality at the given age.

    A sequence of ages gives a numpy array of hazards.
    """
    return model(age)


def cumhazard(
    model: ParametricMortality,
    age: float,
    *,
    integrator: Integrator | None = None,
) -> float:
    """
    Integrated hazard from age 0 to age.

    Uses the law's closed form when it has one; otherwise integrates the
    hazard numerically. Age 0 never reaches the integrator since several
    hazards are special-cased or undefined there.
    """
    closed = _closed_form(model, "cumhazard")
    if closed is not None:
        return float(closed(age))

    age = float(age)
    if age == 0.0:
        return 0.0

    logger.debug("No closed-form cumulative hazard for %r; integrating over [0, %s]", model, age)
    quad = integrate if integrator is None else integrator
    return float(quad(model.hazard, 0.0, age))


def survivorship(
    model: ParametricMortality,
    age: float,
    to_age: float | None = None,
    *,
    integrator: Integrator | None = None,
) -> float:
    """
    With one age, S(age) = exp(-H(age)): probability of surviving from birth
    to age.

    With two ages, the conditional probability of surviving from age to
    to_age given alive at age:

      S(to_age) / S(age)

    which is exactly 1.0 when the two ages coincide.
    """
    if to_age is not None:
        if age == to_age:
            return 1.0
        s_from = survivorship(model, age, integrator=integrator)
        s_to = survivorship(model, to_age, integrator=integrator)
        return float(s_to / s_from)

    closed = _closed_form(model, "survivorship")
    if closed is not None:
        return float(closed(age))
    return float(np.exp(-cumhazard(model, age, integrator=integrator)))


def decrement(
    model: ParametricMortality,
    age: float,
    to_age: float | None = None,
    *,
    integrator: Integrator | None = None,
) -> float:
    """
    Probability of death: by age (one age) or between age and to_age given
    alive at age (two ages).
    """
    return 1.0 - survivorship(model, age, to_age, integrator=integrator)


def t_year_survival(
    model: ParametricMortality,
    age: float,
    t: float,
    *,
    integrator: Integrator | None = None,
) -> float:
    """
    {}_t p_x: probability that a life aged `age` survives another t years.
    """
    if t < 0:
        raise ValueError("t must be >= 0")
    if t == 0:
        return 1.0
    return survivorship(model, age, float(age) + float(t), integrator=integrator)


def survival_table(
    model: ParametricMortality,
    ages,
    *,
    integrator: Integrator | None = None,
) -> pd.DataFrame:
    """
    Tabulate the law over the given ages.

    Output columns:
    age, hazard, cumhazard, survivorship, decrement
    """
    age_arr = np.asarray(ages, dtype=float)
    if age_arr.ndim != 1:
        raise ValueError("ages must be a 1D sequence")

    hazards = np.array([model.hazard(x) for x in age_arr], dtype=float)
    cum = np.array([cumhazard(model, x, integrator=integrator) for x in age_arr], dtype=float)
    if _closed_form(model, "survivorship") is not None:
        surv = np.array([survivorship(model, x, integrator=integrator) for x in age_arr], dtype=float)
    else:
        surv = np.exp(-cum)

    return pd.DataFrame(
        {
            "age": age_arr,
            "hazard": hazards,
            "cumhazard": cum,
            "survivorship": surv,
            "decrement": 1.0 - surv,
        }
    )
