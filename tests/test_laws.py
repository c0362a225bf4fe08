import dataclasses

import numpy as np
import pytest

from mortality_laws.catalog import LAWS, make_law
from mortality_laws.laws import (
    Beard,
    Gompertz,
    InverseGompertz,
    InverseWeibull,
    Makeham,
    MakehamBeard,
    Opperman,
    Perks,
    Quadratic,
    StrehlerMildvan,
    Thiele,
    VanderMaen,
    VanderMaen2,
    Weibull,
    Wittstein,
)


def _age_grid(name: str) -> np.ndarray:
    ages = np.linspace(0.0, 120.0, 241)
    if name == "InverseWeibull":
        # (x/m)^(-m/sigma) is unbounded at age 0
        return ages[1:]
    if name == "Wittstein":
        return ages[ages <= Wittstein().m]
    return ages


@pytest.mark.parametrize("name", sorted(LAWS))
def test_default_hazard_is_non_negative(name: str) -> None:
    model = make_law(name)
    hazards = np.array([model.hazard(x) for x in _age_grid(name)])
    assert np.all(np.isfinite(hazards))
    assert np.all(hazards >= 0.0)


def test_makeham_hazard_and_cumhazard_at_50() -> None:
    model = Makeham(a=0.0002, b=0.13, c=0.001)
    assert np.isclose(model.hazard(50), 0.0002 * np.exp(0.13 * 50) + 0.001, rtol=1e-14)
    assert np.isclose(
        model.cumhazard(50),
        0.0002 / 0.13 * (np.exp(0.13 * 50) - 1) + 50 * 0.001,
        rtol=1e-14,
    )
    assert np.isclose(model.survivorship(50), np.exp(-model.cumhazard(50)))


def test_gompertz_is_makeham_without_constant() -> None:
    g = Gompertz(a=0.0002, b=0.13)
    m = Makeham(a=0.0002, b=0.13, c=0)

    assert isinstance(g, Makeham)
    assert g == m
    for age in [0.0, 1.0, 17.5, 50.0, 90.0, 120.0]:
        assert g.hazard(age) == m.hazard(age)
        assert g.cumhazard(age) == m.cumhazard(age)
        assert g.survivorship(age) == m.survivorship(age)


def test_opperman_default_at_birth() -> None:
    assert Opperman().hazard(0) == pytest.approx(0.0406, abs=1e-15)


def test_opperman_is_floored_at_zero() -> None:
    model = Opperman(a=0.0, b=1.0, c=0.0)
    assert model.hazard(10.0) == 0.0


def test_thiele_excludes_hump_at_birth_only() -> None:
    m = Thiele()
    mu1_0 = m.a
    mu3_0 = m.f
    assert m.hazard(0) == pytest.approx(mu1_0 + mu3_0, rel=1e-14)

    # e = 25 puts age 25 on the peak of the hump, where mu2 = c
    mu1 = m.a * np.exp(-m.b * 25)
    mu3 = m.f * np.exp(m.g * 25)
    assert m.hazard(25) == pytest.approx(mu1 + m.c + mu3, rel=1e-14)
    assert m.hazard(25) - mu1 - mu3 == pytest.approx(m.c, rel=1e-10)


def test_weibull_is_one_at_birth() -> None:
    assert Weibull().hazard(0) == 1.0
    assert Weibull(m=3.0, sigma=0.5).hazard(0.0) == 1.0


def test_weibull_general_formula() -> None:
    m = Weibull(m=2.0, sigma=4.0)
    assert np.isclose(m.hazard(8.0), 0.25 * (8.0 / 2.0) ** (0.5 - 1.0))
    assert np.isclose(m.cumhazard(8.0), (8.0 / 2.0) ** 0.5)


def test_inverse_gompertz_survivorship_starts_at_one() -> None:
    m = InverseGompertz()
    assert np.isclose(m.survivorship(0.0), 1.0)
    assert np.isclose(m.cumhazard(0.0), 0.0, atol=1e-12)
    assert m.survivorship(80.0) < m.survivorship(40.0)


def test_inverse_weibull_closed_forms_are_consistent() -> None:
    m = InverseWeibull()
    for age in [1.0, 5.0, 30.0]:
        assert np.isclose(m.survivorship(age), np.exp(-m.cumhazard(age)))


def test_simple_formulas_match_definitions() -> None:
    x = 40.0
    assert np.isclose(Quadratic().hazard(x), 0.01 + x + 0.01 * x ** 2)
    assert np.isclose(VanderMaen().hazard(x), 0.01 + x + 0.01 * x ** 2 + 100.0 / (200.0 - x))
    assert np.isclose(VanderMaen2().hazard(x), 0.01 + x + 100.0 / (200.0 - x))
    assert np.isclose(StrehlerMildvan().hazard(x), 0.01 * np.exp(-2.5 * (1 - 0.2 * x) / 6.0))

    g = 0.002 * np.exp(0.13 * x)
    assert np.isclose(Beard().hazard(x), g / (1 + g))
    assert np.isclose(MakehamBeard().hazard(x), g / (1 + g) + 0.01)
    assert np.isclose(
        Perks().hazard(x),
        (0.002 + 0.13 * 0.01 ** x) / (0.13 * 0.01 ** -x + 1 + 0.01 * 0.01 ** x),
    )
    assert np.isclose(Wittstein().hazard(x), 1.5 ** -(x ** 0.5) + 1.5 ** -((100 - x) ** 0.5))


def test_undefined_values_are_not_masked() -> None:
    with np.errstate(divide="ignore", invalid="ignore"):
        assert np.isinf(VanderMaen().hazard(200.0))
        assert np.isnan(Wittstein().hazard(110.0))


def test_keyword_overrides_keep_other_defaults() -> None:
    m = Thiele(c=0.01)
    assert m.c == 0.01
    assert m.a == Thiele().a
    assert m.g == Thiele().g


def test_laws_are_immutable() -> None:
    m = Makeham()
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.a = 1.0


def test_call_and_index_alias_hazard() -> None:
    m = Makeham()
    assert m(50.0) == m.hazard(50.0)
    assert m[50.0] == m.hazard(50.0)


def test_vectorised_evaluation_keeps_shape_and_model() -> None:
    m = Thiele()
    ages = np.array([[0.0, 10.0], [25.0, 80.0]])

    out = m(ages)
    assert out.shape == (2, 2)
    assert out[0, 0] == m.hazard(0.0)
    assert out[1, 0] == m.hazard(25.0)

    listed = m[[1.0, 2.0, 3.0]]
    assert np.allclose(listed, [m.hazard(1.0), m.hazard(2.0), m.hazard(3.0)])
    assert m == Thiele()


def test_zero_parameter_divisions_give_non_finite_values() -> None:
    with np.errstate(all="ignore"):
        assert not np.isfinite(Makeham(b=0.0).cumhazard(10.0))
        assert np.isnan(Makeham(b=0.0).survivorship(10.0))
        assert not np.isfinite(Weibull(sigma=0.0).hazard(1.0))
        assert not np.isfinite(Weibull(sigma=0.0).cumhazard(2.0))
        assert not np.isfinite(InverseWeibull(sigma=0.0).hazard(1.0))
        assert not np.isfinite(InverseGompertz(sigma=0.0).hazard(1.0))
        assert not np.isfinite(Wittstein(b=0.0).hazard(1.0))
        # both exponentials saturate, so the ratio collapses to 1
        assert InverseGompertz(sigma=0.0).survivorship(1.0) == 1.0


def test_iterator_of_ages_is_evaluated() -> None:
    m = Makeham()
    ages = [10.0, 50.0, 90.0]

    out = m(x for x in ages)
    assert out.shape == (3,)
    assert np.allclose(out, [m.hazard(x) for x in ages])
    assert np.allclose(m[iter(ages)], out)
