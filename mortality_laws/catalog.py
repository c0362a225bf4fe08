from __future__ import annotations

from typing import Callable

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

LAWS: dict[str, Callable[..., ParametricMortality]] = {
    "Makeham": Makeham,
    "Gompertz": Gompertz,
    "InverseGompertz": InverseGompertz,
    "Opperman": Opperman,
    "Thiele": Thiele,
    "Wittstein": Wittstein,
    "Weibull": Weibull,
    "InverseWeibull": InverseWeibull,
    "Perks": Perks,
    "VanderMaen": VanderMaen,
    "VanderMaen2": VanderMaen2,
    "StrehlerMildvan": StrehlerMildvan,
    "Beard": Beard,
    "MakehamBeard": MakehamBeard,
    "Quadratic": Quadratic,
}


def available_laws() -> list[str]:
    return sorted(LAWS)


def make_law(name: str, **params: float) -> ParametricMortality:
    """
    Build a mortality law by name, overriding any subset of its default
    parameters.
    """
    try:
        factory = LAWS[name]
    except KeyError:
        raise KeyError(f"Unknown mortality law {name!r}; known laws: {available_laws()}") from None
    return factory(**params)
