from mortality_laws.catalog import LAWS, available_laws, make_law
from mortality_laws.laws import (
    Beard,
    Gompertz,
    InverseGompertz,
    InverseWeibull,
    Makeham,
    MakehamBeard,
    Opperman,
    ParametricMortality,
    Perks,
    Quadratic,
    StrehlerMildvan,
    Thiele,
    VanderMaen,
    VanderMaen2,
    Weibull,
    Wittstein,
)
from mortality_laws.quadrature import IntegrationError
from mortality_laws.survival import (
    cumhazard,
    decrement,
    force_of_mortality,
    survival_table,
    survivorship,
    t_year_survival,
)

__all__ = [
    "ParametricMortality",
    "Makeham",
    "Gompertz",
    "InverseGompertz",
    "Opperman",
    "Thiele",
    "Wittstein",
    "Weibull",
    "InverseWeibull",
    "Perks",
    "VanderMaen",
    "VanderMaen2",
    "StrehlerMildvan",
    "Beard",
    "MakehamBeard",
    "Quadratic",
    "LAWS",
    "available_laws",
    "make_law",
    "IntegrationError",
    "force_of_mortality",
    "cumhazard",
    "survivorship",
    "decrement",
    "t_year_survival",
    "survival_table",
]
