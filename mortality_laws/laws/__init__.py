from mortality_laws.laws.base import ParametricMortality
from mortality_laws.laws.composite import Thiele, Wittstein
from mortality_laws.laws.gompertz import (
    Beard,
    Gompertz,
    InverseGompertz,
    Makeham,
    MakehamBeard,
    Perks,
    StrehlerMildvan,
)
from mortality_laws.laws.polynomial import Opperman, Quadratic, VanderMaen, VanderMaen2
from mortality_laws.laws.weibull import InverseWeibull, Weibull

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
]
