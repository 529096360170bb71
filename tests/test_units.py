import dataclasses
import math

import pytest

from orrery import ConfigurationError, UnitSystem
from orrery.constants import AU_M, G_SI, JULIAN_YEAR_S, SOLAR_MASS_KG


def test_solar_units_make_g_four_pi_squared():
    units = UnitSystem.solar()
    assert units.G == pytest.approx(4.0 * math.pi ** 2, rel=1e-3)


def test_seconds_reference_matches_mass_length_rescaling():
    units = UnitSystem.from_reference(G_SI, SOLAR_MASS_KG, AU_M)
    expected = G_SI * SOLAR_MASS_KG * (1.0 / AU_M) ** 3
    assert units.G == pytest.approx(expected, rel=1e-12)
    assert units.time(10.0) == pytest.approx(10.0)


def test_conversions_land_in_reference_units(units):
    assert units.mass(SOLAR_MASS_KG) == pytest.approx(1.0)
    assert units.length(AU_M) == pytest.approx(1.0)
    assert units.years(1.0) == pytest.approx(1.0)
    assert units.time(JULIAN_YEAR_S / 2.0) == pytest.approx(0.5)
    # Earth's mean orbital speed is ~2 pi AU per year
    assert units.velocity(29_784.0) == pytest.approx(2.0 * math.pi, rel=1e-2)


def test_scaled_quantities_stay_in_comfortable_range(units):
    earth = units.mass(5.97e24)
    assert 1e-8 < earth < 1.0
    assert 1e-3 < units.G < 1e3


@pytest.mark.parametrize("field", ["reference_mass", "reference_length", "reference_time"])
@pytest.mark.parametrize("bad", [0.0, -1.0, float("nan"), float("inf")])
def test_rejects_non_positive_references(field, bad):
    kwargs = dict(G_physical=G_SI, reference_mass=SOLAR_MASS_KG, reference_length=AU_M, reference_time=1.0)
    kwargs[field] = bad
    with pytest.raises(ConfigurationError):
        UnitSystem.from_reference(**kwargs)


def test_unit_system_is_immutable(units):
    with pytest.raises(dataclasses.FrozenInstanceError):
        units.G = 1.0
