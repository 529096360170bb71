"""
Ready-made body configurations.

solar_system() returns the Sun, the eight planets and the Moon with their real masses,
semi-major axes, eccentricities, sidereal periods and inclinations to the ecliptic
(J2000 mean elements). Masses are converted to fractions of the unit system's reference
mass, so the list can be built with any UnitSystem whose reference length is one
astronomical unit.
"""

from __future__ import annotations
import math
from typing import List

from .constants import SOLAR_MASS_KG, AU_M
from .system_builder import BodySpec, CentralBodySpec, PlanetSpec, SatelliteSpec
from .units import UnitSystem

# name, mass [kg], a [AU], e, period [yr], inclination [deg]
PLANETS = (
	("Mercury", 3.3011e23,  0.387098, 0.205630,   0.240846, 7.005),
	("Venus",   4.8675e24,  0.723332, 0.006772,   0.615198, 3.39458),
	("Earth",   5.97217e24, 1.000001, 0.0167086,  1.0000174, 0.00005),
	("Mars",    6.4171e23,  1.523679, 0.0934,     1.88082,  1.850),
	("Jupiter", 1.8982e27,  5.2044,   0.0489,    11.862,    1.303),
	("Saturn",  5.6834e26,  9.5826,   0.0565,    29.4571,   2.485),
	("Uranus",  8.6810e25, 19.19126,  0.04717,   84.0205,   0.773),
	("Neptune", 1.02413e26, 30.07,    0.008678, 164.8,      1.770),
)

MOON_MASS_KG = 7.342e22
MOON_DISTANCE_M = 3.84399e8
MOON_PERIOD_YEARS = 27.321661 / 365.25
MOON_INCLINATION_DEG = 5.145


def solar_system(units: UnitSystem | None = None, *, include_moon: bool = True) -> List[BodySpec]:
	units = units or UnitSystem.solar()
	au = units.length(AU_M)

	specs: List[BodySpec] = [
		CentralBodySpec("Sun", mass_fraction=units.mass(SOLAR_MASS_KG)),
	]
	for name, mass_kg, a_au, e, period, inc_deg in PLANETS:
		specs.append(PlanetSpec(
			name=name,
			mass_fraction=units.mass(mass_kg),
			semi_major_axis=a_au * au,
			eccentricity=e,
			period_years=period,
			inclination=math.radians(inc_deg),
		))

	if include_moon:
		specs.append(SatelliteSpec(
			name="Moon",
			mass_fraction=units.mass(MOON_MASS_KG),
			primary="Earth",
			distance=units.length(MOON_DISTANCE_M),
			period_years=MOON_PERIOD_YEARS,
			inclination=math.radians(MOON_INCLINATION_DEG),
		))
	return specs
